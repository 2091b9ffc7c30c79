"""remove_unused_job_fields

Revision ID: a04f6c8e1b57
Revises: 5e7b9a0c3d21
Create Date: 2025-03-21 14:27:45.009183

Drops the numeric salary (replaced by salary_range) and post_date
(replaced by posting_date).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a04f6c8e1b57'
down_revision: Union[str, None] = '5e7b9a0c3d21'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.drop_column('salary')
        batch_op.drop_column('post_date')


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.add_column(sa.Column('salary', sa.Numeric(precision=12, scale=2), nullable=True))
        batch_op.add_column(sa.Column('post_date', sa.DateTime(), nullable=True))
