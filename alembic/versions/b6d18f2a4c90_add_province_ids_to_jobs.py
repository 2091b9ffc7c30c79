"""add_province_ids_to_jobs

Revision ID: b6d18f2a4c90
Revises: a04f6c8e1b57
Create Date: 2025-04-02 11:51:19.662375

Jobs can be posted to several provinces. province_ids holds the list and is
seeded from the existing single province_id. New rows default to an empty list
at the database level, so inserts that bypass the ORM never see NULL.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b6d18f2a4c90'
down_revision: Union[str, None] = 'a04f6c8e1b57'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


jobs_table = sa.table(
    'jobs',
    sa.column('id', sa.Integer),
    sa.column('province_id', sa.Integer),
    sa.column('province_ids', sa.JSON),
)


def empty_json_array(dialect_name: str):
    # MySQL only accepts expression defaults on JSON columns
    if dialect_name == 'mysql':
        return sa.text('(JSON_ARRAY())')
    return sa.text("'[]'")


def upgrade() -> None:
    bind = op.get_bind()
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.add_column(sa.Column(
            'province_ids', sa.JSON(), nullable=True,
            server_default=empty_json_array(bind.dialect.name),
        ))

    rows = bind.execute(sa.select(jobs_table.c.id, jobs_table.c.province_id)).fetchall()
    if rows:
        bind.execute(
            jobs_table.update()
            .where(jobs_table.c.id == sa.bindparam('job_id'))
            .values(province_ids=sa.bindparam('ids', type_=sa.JSON)),
            [
                {'job_id': job_id, 'ids': [province_id] if province_id is not None else []}
                for job_id, province_id in rows
            ],
        )


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.drop_column('province_ids')
