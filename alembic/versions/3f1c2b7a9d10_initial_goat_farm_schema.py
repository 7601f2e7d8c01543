"""initial goat farm schema

Revision ID: 3f1c2b7a9d10
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2b7a9d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(with_updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]
    if with_updated:
        columns.append(
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
        )
    return columns


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column(
            'role',
            sa.Enum('ADMIN', 'MANAGER', 'STAFF', 'VIEWER', name='user_role', native_enum=False),
            nullable=False,
        ),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=False)

    op.create_table(
        'goats',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tag_no', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('breed', sa.String(length=100), nullable=False),
        sa.Column('gender', sa.String(length=6), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='Active'),
        sa.Column('weight', sa.Numeric(8, 2), nullable=True),
        sa.Column('purpose', sa.String(length=32), nullable=True),
        sa.Column('source', sa.String(length=32), nullable=True),
        sa.Column('purchase_price', sa.Numeric(12, 2), nullable=True),
        sa.Column('purchase_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('sire_id', sa.Uuid(), nullable=True),
        sa.Column('dam_id', sa.Uuid(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        sa.Column('updated_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_goats'),
        sa.UniqueConstraint('tag_no', name='ux_goats_tag_no'),
        sa.ForeignKeyConstraint(['sire_id'], ['goats.id'], name='fk_goats_sire_id_goats', ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['dam_id'], ['goats.id'], name='fk_goats_dam_id_goats', ondelete='SET NULL'),
    )
    op.create_index('idx_goats_status_gender', 'goats', ['status', 'gender'], unique=False)
    op.create_index('idx_goats_status_breed', 'goats', ['status', 'breed'], unique=False)

    op.create_table(
        'breeding_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('reference_no', sa.String(length=32), nullable=False),
        sa.Column('male_goat_id', sa.Uuid(), nullable=False),
        sa.Column('female_goat_id', sa.Uuid(), nullable=False),
        sa.Column('breeding_date', sa.Date(), nullable=False),
        sa.Column('method', sa.String(length=16), nullable=False, server_default='Natural'),
        sa.Column('expected_kid_date', sa.Date(), nullable=True),
        sa.Column('actual_kid_date', sa.Date(), nullable=True),
        sa.Column('kids_born', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_records'),
        sa.UniqueConstraint('reference_no', name='ux_breeding_records_reference_no'),
        sa.ForeignKeyConstraint(
            ['male_goat_id'], ['goats.id'], name='fk_breeding_records_male_goat_id_goats', ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['female_goat_id'], ['goats.id'], name='fk_breeding_records_female_goat_id_goats', ondelete='CASCADE'
        ),
    )
    op.create_index(
        'idx_breeding_records_expected_kid_date', 'breeding_records', ['expected_kid_date'], unique=False
    )

    op.create_table(
        'health_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('reference_no', sa.String(length=32), nullable=False),
        sa.Column('goat_id', sa.Uuid(), nullable=False),
        sa.Column('record_type', sa.String(length=32), nullable=False),
        sa.Column('record_date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('medicine', sa.String(length=255), nullable=True),
        sa.Column('dosage', sa.String(length=100), nullable=True),
        sa.Column('veterinarian', sa.String(length=255), nullable=True),
        sa.Column('cost', sa.Numeric(10, 2), nullable=True),
        sa.Column('next_due_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_health_records'),
        sa.UniqueConstraint('reference_no', name='ux_health_records_reference_no'),
        sa.ForeignKeyConstraint(
            ['goat_id'], ['goats.id'], name='fk_health_records_goat_id_goats', ondelete='CASCADE'
        ),
    )
    op.create_index('idx_health_records_goat_date', 'health_records', ['goat_id', 'record_date'], unique=False)
    op.create_index('idx_health_records_next_due_date', 'health_records', ['next_due_date'], unique=False)

    op.create_table(
        'weight_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('goat_id', sa.Uuid(), nullable=False),
        sa.Column('recorded_on', sa.Date(), nullable=False),
        sa.Column('weight', sa.Numeric(8, 2), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(with_updated=False),
        sa.PrimaryKeyConstraint('id', name='pk_weight_records'),
        sa.ForeignKeyConstraint(
            ['goat_id'], ['goats.id'], name='fk_weight_records_goat_id_goats', ondelete='CASCADE'
        ),
    )
    op.create_index('idx_weight_records_goat_date', 'weight_records', ['goat_id', 'recorded_on'], unique=False)

    op.create_table(
        'expenses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('reference_no', sa.String(length=32), nullable=False),
        sa.Column('expense_date', sa.Date(), nullable=False),
        sa.Column('category', sa.String(length=32), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('payment_mode', sa.String(length=32), nullable=True),
        sa.Column('vendor', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_expenses'),
        sa.UniqueConstraint('reference_no', name='ux_expenses_reference_no'),
    )
    op.create_index('idx_expenses_date_category', 'expenses', ['expense_date', 'category'], unique=False)

    op.create_table(
        'sales_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('reference_no', sa.String(length=32), nullable=False),
        sa.Column('goat_id', sa.Uuid(), nullable=False),
        sa.Column('sale_date', sa.Date(), nullable=False),
        sa.Column('sale_price', sa.Numeric(12, 2), nullable=False),
        sa.Column('buyer_name', sa.String(length=255), nullable=True),
        sa.Column('buyer_contact', sa.String(length=100), nullable=True),
        sa.Column('sale_type', sa.String(length=16), nullable=False, server_default='Live'),
        sa.Column('weight_at_sale', sa.Numeric(8, 2), nullable=True),
        sa.Column('payment_status', sa.String(length=16), nullable=False, server_default='Paid'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_sales_records'),
        sa.UniqueConstraint('reference_no', name='ux_sales_records_reference_no'),
        # Sold goats keep their sale history; deleting them is refused
        sa.ForeignKeyConstraint(
            ['goat_id'], ['goats.id'], name='fk_sales_records_goat_id_goats', ondelete='RESTRICT'
        ),
    )
    op.create_index('idx_sales_records_sale_date', 'sales_records', ['sale_date'], unique=False)

    op.create_table(
        'inventory_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('reference_no', sa.String(length=32), nullable=False),
        sa.Column('item_name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=32), nullable=False),
        sa.Column('quantity', sa.Numeric(12, 2), nullable=False),
        sa.Column('unit', sa.String(length=32), nullable=False),
        sa.Column('min_stock', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('unit_price', sa.Numeric(12, 2), nullable=True),
        sa.Column('supplier', sa.String(length=255), nullable=True),
        sa.Column('expiry_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_inventory_items'),
        sa.UniqueConstraint('reference_no', name='ux_inventory_items_reference_no'),
    )
    op.create_index('idx_inventory_items_category', 'inventory_items', ['category'], unique=False)

    op.create_table(
        'reference_counters',
        sa.Column('kind', sa.String(length=8), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('kind', name='pk_reference_counters'),
    )


def downgrade() -> None:
    op.drop_table('reference_counters')
    op.drop_index('idx_inventory_items_category', table_name='inventory_items')
    op.drop_table('inventory_items')
    op.drop_index('idx_sales_records_sale_date', table_name='sales_records')
    op.drop_table('sales_records')
    op.drop_index('idx_expenses_date_category', table_name='expenses')
    op.drop_table('expenses')
    op.drop_index('idx_weight_records_goat_date', table_name='weight_records')
    op.drop_table('weight_records')
    op.drop_index('idx_health_records_next_due_date', table_name='health_records')
    op.drop_index('idx_health_records_goat_date', table_name='health_records')
    op.drop_table('health_records')
    op.drop_index('idx_breeding_records_expected_kid_date', table_name='breeding_records')
    op.drop_table('breeding_records')
    op.drop_index('idx_goats_status_breed', table_name='goats')
    op.drop_index('idx_goats_status_gender', table_name='goats')
    op.drop_table('goats')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
