"""add_submission_fields_to_jobs

Revision ID: 5e7b9a0c3d21
Revises: 8c21d4e6f013
Create Date: 2025-03-15 09:02:33.874410

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e7b9a0c3d21'
down_revision: Union[str, None] = '8c21d4e6f013'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add submission email and guidelines to jobs."""
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.add_column(sa.Column('submission_email', sa.String(length=255), nullable=True))
        batch_op.add_column(sa.Column('submission_guidelines', sa.Text(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.drop_column('submission_guidelines')
        batch_op.drop_column('submission_email')
