"""create apartments table

Revision ID: 3f8a21c7d9e4
Revises:
Create Date: 2026-10-18 10:12:41.503117

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f8a21c7d9e4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'apartments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('project', sa.String(length=255), nullable=False),
        sa.Column('unit_name', sa.String(length=255), nullable=False),
        sa.Column('unit_number', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('area', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='available'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('project', 'unit_number', name='unique_project_unit_number'),
        sa.CheckConstraint('price > 0', name='apartments_price_positive'),
        sa.CheckConstraint('area > 0', name='apartments_area_positive'),
        sa.CheckConstraint(
            "status IN ('available', 'sold', 'reserved')",
            name='apartments_status_check',
        ),
    )

    # Listing queries sort by these
    op.create_index('idx_apartments_created_at', 'apartments', ['created_at'])
    op.create_index('idx_apartments_price', 'apartments', ['price'])


def downgrade() -> None:
    op.drop_index('idx_apartments_price', table_name='apartments')
    op.drop_index('idx_apartments_created_at', table_name='apartments')
    op.drop_table('apartments')
