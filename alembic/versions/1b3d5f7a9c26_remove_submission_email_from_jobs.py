"""remove_submission_email_from_jobs

Revision ID: 1b3d5f7a9c26
Revises: 0a2c4e6f8b15
Create Date: 2025-05-20 15:11:03.580447

Applications are no longer submitted by email; the guidelines text stays.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '1b3d5f7a9c26'
down_revision: Union[str, None] = '0a2c4e6f8b15'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.drop_column('submission_email')


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.add_column(sa.Column('submission_email', sa.String(length=255), nullable=True))
