"""years_of_experience_to_string

Revision ID: c2e4a6b8d0f1
Revises: b6d18f2a4c90
Create Date: 2025-04-10 08:33:58.241706

Allows free-text experience such as "3-5 years".
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c2e4a6b8d0f1'
down_revision: Union[str, None] = 'b6d18f2a4c90'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column(
            'years_of_experience',
            existing_type=sa.Integer(),
            type_=sa.String(length=100),
            existing_nullable=True,
            postgresql_using='years_of_experience::varchar(100)',
        )


def downgrade() -> None:
    """Back to INTEGER. Free-text values do not survive this."""
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column(
            'years_of_experience',
            existing_type=sa.String(length=100),
            type_=sa.Integer(),
            existing_nullable=True,
            postgresql_using='years_of_experience::integer',
        )
