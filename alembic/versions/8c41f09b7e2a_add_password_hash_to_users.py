"""add password_hash to users

Revision ID: 8c41f09b7e2a
Revises: 3a7e51c2d904
Create Date: 2026-03-04 18:15:42.611207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c41f09b7e2a'
down_revision: Union[str, Sequence[str], None] = '3a7e51c2d904'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Nullable: користувачі, створені скриптом без пароля, входять за токеном."""
    op.add_column('users', sa.Column('password_hash', sa.String(), nullable=True))


def downgrade() -> None:
    op.drop_column('users', 'password_hash')
