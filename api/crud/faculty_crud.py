from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
from models.faculty import Faculty
from schemas.faculty import FacultyCreate, FacultyUpdate
from core.exceptions import DuplicateName


def get_faculty(db: Session, faculty_id: UUID) -> Optional[Faculty]:
    return db.query(Faculty).filter(Faculty.id == faculty_id).first()


def get_faculty_by_name(db: Session, name: str) -> Optional[Faculty]:
    return db.query(Faculty).filter(Faculty.name == name).first()


def list_faculties(db: Session) -> List[Faculty]:
    return db.query(Faculty).order_by(Faculty.name).all()


def list_faculties_by_points(db: Session) -> List[Faculty]:
    """Факультети за загальними балами (спадання), при рівності - за назвою"""
    return db.query(Faculty).order_by(
        Faculty.total_points.desc(),
        Faculty.name.asc()
    ).all()


def create_faculty(db: Session, faculty_data: FacultyCreate) -> Faculty:
    if get_faculty_by_name(db, faculty_data.name):
        raise DuplicateName("Faculty", faculty_data.name)

    db_faculty = Faculty(name=faculty_data.name, total_points=0)
    db.add(db_faculty)
    db.commit()
    db.refresh(db_faculty)
    return db_faculty


def update_faculty(db: Session, faculty: Faculty, faculty_update: FacultyUpdate) -> Faculty:
    update_data = faculty_update.model_dump(exclude_unset=True)
    new_name = update_data.get("name")
    if new_name and new_name != faculty.name and get_faculty_by_name(db, new_name):
        raise DuplicateName("Faculty", new_name)

    for field, value in update_data.items():
        setattr(faculty, field, value)

    db.commit()
    db.refresh(faculty)
    return faculty


def delete_faculty(db: Session, faculty: Faculty):
    db.delete(faculty)
    db.commit()


def credit_faculty_points(db: Session, faculty_id: UUID, points: int) -> int:
    """
    Атомарно додати бали факультету (UPDATE ... SET total_points = total_points + n).
    Без commit - викликається всередині транзакції нарахування.
    Повертає кількість оновлених рядків (0 якщо факультет не існує).
    """
    return db.query(Faculty).filter(Faculty.id == faculty_id).update(
        {Faculty.total_points: Faculty.total_points + points},
        synchronize_session="fetch"
    )
