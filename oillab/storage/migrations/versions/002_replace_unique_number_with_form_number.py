"""Replace report.unique_number with a unique form_number

Revision ID: 002
Revises: 001
Create Date: 2026-09-21 15:40:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Drop unique_number and add form_number with a unique constraint."""
    op.drop_index('ix_report_unique_number', table_name='report')
    op.drop_column('report', 'unique_number')
    op.add_column(
        'report',
        sa.Column('form_number', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    )
    op.create_unique_constraint('report_form_number_key', 'report', ['form_number'])


def downgrade() -> None:
    """Restore unique_number."""
    op.drop_constraint('report_form_number_key', 'report', type_='unique')
    op.drop_column('report', 'form_number')
    op.add_column(
        'report',
        sa.Column('unique_number', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    )
    op.create_index('ix_report_unique_number', 'report', ['unique_number'], unique=True)
