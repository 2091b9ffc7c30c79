"""baseline_jobs_and_books

Revision ID: 3f9a1c7e2b40
Revises: 
Create Date: 2025-03-02 10:14:52.118204

Creates the jobs and books tables in their original, denormalized shape.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c7e2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


job_type_enum = sa.Enum('full-time', 'part-time', 'contract', 'internship', 'freelance', name='job_type')
job_status_enum = sa.Enum('active', 'inactive', 'expired', 'filled', 'draft', name='job_status')
book_format_enum = sa.Enum('pdf', 'epub', 'mobi', 'docx', 'txt', 'html', name='book_format')
book_status_enum = sa.Enum('draft', 'published', 'archived', 'pending_review', name='book_status')


def upgrade() -> None:
    op.create_table('jobs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('company', sa.String(length=100), nullable=True),
        sa.Column('type', job_type_enum, server_default='full-time', nullable=False),
        sa.Column('status', job_status_enum, server_default='active', nullable=False),
        sa.Column('province_id', sa.Integer(), nullable=True),
        sa.Column('salary', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('requirements', sa.JSON(), nullable=True),
        sa.Column('benefits', sa.Text(), nullable=True),
        sa.Column('post_date', sa.DateTime(), nullable=True),
        sa.Column('deadline', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_jobs_title'), 'jobs', ['title'], unique=False)
    op.create_index('ix_jobs_status', 'jobs', ['status'], unique=False)

    op.create_table('books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('language', sa.String(length=50), server_default='English', nullable=False),
        sa.Column('format', book_format_enum, server_default='pdf', nullable=True),
        sa.Column('status', book_status_enum, server_default='draft', nullable=False),
        sa.Column('download_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('view_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')

    op.drop_index('ix_jobs_status', table_name='jobs')
    op.drop_index(op.f('ix_jobs_title'), table_name='jobs')
    op.drop_table('jobs')

    # drop_table leaves native enum types behind on PostgreSQL
    bind = op.get_bind()
    for enum_type in (book_status_enum, book_format_enum, job_status_enum, job_type_enum):
        enum_type.drop(bind, checkfirst=True)
