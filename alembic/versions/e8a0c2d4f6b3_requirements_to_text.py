"""requirements_to_text

Revision ID: e8a0c2d4f6b3
Revises: d7f3b5c9e1a2
Create Date: 2025-05-03 12:19:26.447561

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'e8a0c2d4f6b3'
down_revision: Union[str, None] = 'd7f3b5c9e1a2'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Store requirements as rich text instead of a JSON list."""
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column(
            'requirements',
            existing_type=sa.JSON(),
            type_=sa.Text(),
            existing_nullable=True,
            postgresql_using='requirements::text',
        )


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column(
            'requirements',
            existing_type=sa.Text(),
            type_=sa.JSON(),
            existing_nullable=True,
            postgresql_using='requirements::json',
        )
