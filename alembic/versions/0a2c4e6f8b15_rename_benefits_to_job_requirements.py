"""rename_benefits_to_job_requirements

Revision ID: 0a2c4e6f8b15
Revises: f1b3d5e7a9c4
Create Date: 2025-05-03 12:55:41.772018

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0a2c4e6f8b15'
down_revision: Union[str, None] = 'f1b3d5e7a9c4'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column(
            'benefits',
            new_column_name='job_requirements',
            existing_type=sa.Text(),
            existing_nullable=True,
        )


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column(
            'job_requirements',
            new_column_name='benefits',
            existing_type=sa.Text(),
            existing_nullable=True,
        )
