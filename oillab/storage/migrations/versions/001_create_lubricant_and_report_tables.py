"""Initial migration - create lubricant and report tables

Revision ID: 001
Revises:
Create Date: 2026-09-14 10:12:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

product_type = sa.Enum(
    'ENGINE_OIL',
    'TRANSMISSION_OIL',
    'HYDRAULIC_OIL',
    'GEAR_OIL',
    'INDUSTRIAL_OIL',
    'GREASE',
    name='producttype',
)


def upgrade() -> None:
    """Create lubricant and report tables."""
    op.create_table(
        'lubricant',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('product_type', product_type, nullable=True),
        sa.Column('model', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('brand', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('viscosity', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'report',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('unique_number', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('client', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('vehicle', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('sampled_at', sa.Date(), nullable=True),
        sa.Column('lubricant_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['lubricant_id'], ['lubricant.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_report_lubricant_id', 'report', ['lubricant_id'])
    op.create_index('ix_report_unique_number', 'report', ['unique_number'], unique=True)


def downgrade() -> None:
    """Drop report and lubricant tables."""
    op.drop_index('ix_report_unique_number', table_name='report')
    op.drop_index('ix_report_lubricant_id', table_name='report')
    op.drop_table('report')
    op.drop_table('lubricant')
    product_type.drop(op.get_bind(), checkfirst=True)
