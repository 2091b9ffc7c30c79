"""remove_view_count_from_books

Revision ID: 3d5f7b9c1e48
Revises: 2c4e6a8b0d37
Create Date: 2025-06-07 10:31:12.806221

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3d5f7b9c1e48'
down_revision: Union[str, None] = '2c4e6a8b0d37'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('books') as batch_op:
        batch_op.drop_column('view_count')


def downgrade() -> None:
    with op.batch_alter_table('books') as batch_op:
        batch_op.add_column(sa.Column('view_count', sa.Integer(), server_default='0', nullable=False))
