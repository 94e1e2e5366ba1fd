from enum import Enum


class UserRole(str, Enum):
    """Ролі користувачів у системі"""
    ADMIN = "ADMIN"      # Адмін - факультети, ігри, матчі, нарахування балів
    MANAGER = "MANAGER"  # Менеджер гри - рахунок, статус і переможець своїх матчів

    @classmethod
    def get_hierarchy(cls) -> dict:
        """Повертає ієрархію ролей (вищі ролі включають права нижчих)"""
        return {
            cls.ADMIN: [cls.ADMIN, cls.MANAGER],
            cls.MANAGER: [cls.MANAGER],
        }

    @classmethod
    def has_permission(cls, user_role: str, required_role: str) -> bool:
        """Перевіряє, чи має користувач з user_role доступ до required_role"""
        hierarchy = cls.get_hierarchy()
        return required_role in hierarchy.get(user_role, [])
