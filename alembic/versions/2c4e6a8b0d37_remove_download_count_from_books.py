"""remove_download_count_from_books

Revision ID: 2c4e6a8b0d37
Revises: 1b3d5f7a9c26
Create Date: 2025-06-07 10:26:39.114953

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '2c4e6a8b0d37'
down_revision: Union[str, None] = '1b3d5f7a9c26'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('books') as batch_op:
        batch_op.drop_column('download_count')


def downgrade() -> None:
    """Re-added counters start at zero, not NULL."""
    with op.batch_alter_table('books') as batch_op:
        batch_op.add_column(sa.Column('download_count', sa.Integer(), server_default='0', nullable=False))
