"""add_job_detail_fields

Revision ID: 8c21d4e6f013
Revises: 3f9a1c7e2b40
Create Date: 2025-03-09 16:40:07.530911

Adds logo, contract, vacancy, salary range and experience details to jobs.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c21d4e6f013'
down_revision: Union[str, None] = '3f9a1c7e2b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


gender_enum = sa.Enum('any', 'male', 'female', name='job_gender')
contract_type_enum = sa.Enum('permanent', 'temporary', 'contract', 'internship', name='job_contract_type')


def upgrade() -> None:
    # add_column does not create native enum types (PostgreSQL)
    bind = op.get_bind()
    gender_enum.create(bind, checkfirst=True)
    contract_type_enum.create(bind, checkfirst=True)

    with op.batch_alter_table('jobs') as batch_op:
        batch_op.add_column(sa.Column('company_logo', sa.String(length=500), nullable=True))
        batch_op.add_column(sa.Column('education', sa.String(length=100), nullable=True))
        batch_op.add_column(sa.Column('gender', gender_enum, server_default='any', nullable=True))
        batch_op.add_column(sa.Column('contract_type', contract_type_enum, nullable=True))
        batch_op.add_column(sa.Column('contract_duration', sa.String(length=50), nullable=True))
        batch_op.add_column(sa.Column('contract_extensible', sa.Boolean(), server_default=sa.false(), nullable=True))
        batch_op.add_column(sa.Column('probation_period', sa.String(length=50), nullable=True))
        batch_op.add_column(sa.Column('reference_number', sa.String(length=50), nullable=True))
        batch_op.add_column(sa.Column('number_of_vacancies', sa.Integer(), server_default='1', nullable=True))
        batch_op.add_column(sa.Column('salary_range', sa.String(length=100), nullable=True))
        batch_op.add_column(sa.Column('years_of_experience', sa.Integer(), nullable=True))
        batch_op.add_column(sa.Column('closing_date', sa.DateTime(), nullable=True))
        batch_op.add_column(sa.Column('posting_date', sa.DateTime(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table('jobs') as batch_op:
        batch_op.drop_column('posting_date')
        batch_op.drop_column('closing_date')
        batch_op.drop_column('years_of_experience')
        batch_op.drop_column('salary_range')
        batch_op.drop_column('number_of_vacancies')
        batch_op.drop_column('reference_number')
        batch_op.drop_column('probation_period')
        batch_op.drop_column('contract_extensible')
        batch_op.drop_column('contract_duration')
        batch_op.drop_column('contract_type')
        batch_op.drop_column('gender')
        batch_op.drop_column('education')
        batch_op.drop_column('company_logo')

    bind = op.get_bind()
    contract_type_enum.drop(bind, checkfirst=True)
    gender_enum.drop(bind, checkfirst=True)
