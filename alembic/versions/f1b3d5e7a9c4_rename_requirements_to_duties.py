"""rename_requirements_to_duties_and_responsibilities

Revision ID: f1b3d5e7a9c4
Revises: e8a0c2d4f6b3
Create Date: 2025-05-03 12:48:10.305992

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'f1b3d5e7a9c4'
down_revision: Union[str, None] = 'e8a0c2d4f6b3'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column(
            'requirements',
            new_column_name='duties_and_responsibilities',
            existing_type=sa.Text(),
            existing_nullable=True,
        )


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column(
            'duties_and_responsibilities',
            new_column_name='requirements',
            existing_type=sa.Text(),
            existing_nullable=True,
        )
