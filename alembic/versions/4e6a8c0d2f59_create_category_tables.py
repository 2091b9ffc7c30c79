"""create_category_tables

Revision ID: 4e6a8c0d2f59
Revises: 3d5f7b9c1e48
Create Date: 2025-06-22 18:44:57.390165

Book and article categories as simple unique-name tables, seeded with the
default category lists.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.db.models.category import DEFAULT_ARTICLE_CATEGORIES, DEFAULT_BOOK_CATEGORIES


# revision identifiers, used by Alembic.
revision: str = '4e6a8c0d2f59'
down_revision: Union[str, None] = '3d5f7b9c1e48'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_category_table(table_name: str) -> sa.Table:
    return op.create_table(table_name,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', name=f'uq_{table_name}_name')
    )


def upgrade() -> None:
    book_categories = _create_category_table('book_categories')
    article_categories = _create_category_table('article_categories')

    op.bulk_insert(book_categories, [{'name': name} for name in DEFAULT_BOOK_CATEGORIES])
    op.bulk_insert(article_categories, [{'name': name} for name in DEFAULT_ARTICLE_CATEGORIES])


def downgrade() -> None:
    op.drop_table('article_categories')
    op.drop_table('book_categories')
