"""normalize_companies

Revision ID: d7f3b5c9e1a2
Revises: c2e4a6b8d0f1
Create Date: 2025-04-18 17:05:44.913027

Moves company name/logo out of jobs into a companies table referenced by
jobs.company_id.

One company row is created per distinct name. When jobs disagree on a
company's logo, the first non-null logo (lowest job id) is kept. Jobs with
no company are attached to a placeholder company, which the downgrade turns
back into NULL.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.db.company_normalization import (
    UNASSIGNED_COMPANY_NAME,
    backfill_company_ids,
    collect_company_pairs,
    has_unassigned_jobs,
    insert_companies,
    resolve_companies,
    restore_company_columns,
)


# revision identifiers, used by Alembic.
revision: str = 'd7f3b5c9e1a2'
down_revision: Union[str, None] = 'c2e4a6b8d0f1'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


FK_NAME = 'fk_jobs_company_id_companies'


def upgrade() -> None:
    op.create_table('companies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('about', sa.Text(), nullable=True),
        sa.Column('logo', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_companies_name'), 'companies', ['name'], unique=True)

    bind = op.get_bind()
    companies = resolve_companies(collect_company_pairs(bind))
    if has_unassigned_jobs(bind):
        companies.setdefault(UNASSIGNED_COMPANY_NAME, None)
    mapping = insert_companies(bind, companies)

    with op.batch_alter_table('jobs') as batch_op:
        batch_op.add_column(sa.Column('company_id', sa.Integer(), nullable=True))
        batch_op.create_foreign_key(FK_NAME, 'companies', ['company_id'], ['id'])

    backfill_company_ids(bind, mapping)

    # NOT NULL only once every row has been backfilled
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.alter_column('company_id', existing_type=sa.Integer(), nullable=False)
        batch_op.create_index('ix_jobs_company_id', ['company_id'], unique=False)
        batch_op.drop_column('company_logo')
        batch_op.drop_column('company')


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.add_column(sa.Column('company', sa.String(length=100), nullable=True))
        batch_op.add_column(sa.Column('company_logo', sa.String(length=500), nullable=True))

    restore_company_columns(op.get_bind())

    with op.batch_alter_table('jobs') as batch_op:
        batch_op.drop_constraint(FK_NAME, type_='foreignkey')
        batch_op.drop_index('ix_jobs_company_id')
        batch_op.drop_column('company_id')

    op.drop_index(op.f('ix_companies_name'), table_name='companies')
    op.drop_table('companies')
