"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


user_role = postgresql.ENUM('customer', 'staff', 'manager', 'admin', name='user_role', create_type=False)
table_status = postgresql.ENUM('available', 'reserved', 'occupied', 'maintenance', name='table_status', create_type=False)
reservation_status = postgresql.ENUM(
    'pending', 'confirmed', 'seated', 'completed', 'cancelled', 'no_show',
    name='reservation_status',
    create_type=False,
)
waitlist_status = postgresql.ENUM(
    'waiting', 'notified', 'seated', 'left', 'cancelled',
    name='waitlist_status',
    create_type=False,
)
menu_item_type = postgresql.ENUM(
    'starter', 'main', 'dessert', 'drink', 'special',
    name='menu_item_type',
    create_type=False,
)

ENUMS = (user_role, table_status, reservation_status, waitlist_status, menu_item_type)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in ENUMS:
        enum_type.create(bind, checkfirst=True)

    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), unique=True, nullable=False),
        sa.Column('username', sa.String(100), unique=True, nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100)),
        sa.Column('last_name', sa.String(100)),
        sa.Column('phone_number', sa.String(20)),
        sa.Column('role', user_role, nullable=False, server_default='customer'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('verification_token', sa.String(255)),
        sa.Column('reset_password_token', sa.String(255)),
        sa.Column('preferences', sa.JSON()),
        sa.Column('last_login', sa.DateTime()),
        *_timestamps(),
    )

    # Create dining_areas table
    op.create_table(
        'dining_areas',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('floor_plan', sa.JSON()),
        *_timestamps(),
    )

    # Create restaurant_tables table
    op.create_table(
        'restaurant_tables',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('dining_area_id', sa.Integer(), sa.ForeignKey('dining_areas.id', ondelete='CASCADE'), nullable=False),
        sa.Column('table_number', sa.String(20), unique=True, nullable=False),
        sa.Column('capacity', sa.SmallInteger(), nullable=False),
        sa.Column('status', table_status, nullable=False, server_default='available'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('position', sa.JSON()),
        sa.Column('shape', sa.String(20), server_default='rectangle'),
        sa.Column('size', sa.JSON()),
        sa.Column('metadata', sa.JSON()),
        *_timestamps(),
    )

    # Create special_events table
    op.create_table(
        'special_events',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.Time()),
        sa.Column('end_time', sa.Time()),
        sa.Column('capacity', sa.Integer()),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_fully_booked', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('image_url', sa.String(255)),
        *_timestamps(),
    )

    # Create time_slots table
    op.create_table(
        'time_slots',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('day_of_week', sa.SmallInteger(), nullable=False),
        sa.Column('max_reservations', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('special_event_id', sa.Integer(), sa.ForeignKey('special_events.id', ondelete='SET NULL')),
        *_timestamps(),
    )

    # Create operating_hours table
    op.create_table(
        'operating_hours',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('day_of_week', sa.SmallInteger(), nullable=False),
        sa.Column('open_time', sa.Time(), nullable=False),
        sa.Column('close_time', sa.Time(), nullable=False),
        sa.Column('is_closed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_special_hours', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('special_date', sa.Date()),
        sa.Column('meal_period', sa.String(20)),
        *_timestamps(),
    )

    # Create reservations table
    op.create_table(
        'reservations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL')),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time()),
        sa.Column('guests', sa.SmallInteger(), nullable=False),
        sa.Column('status', reservation_status, nullable=False, server_default='pending'),
        sa.Column('special_requests', sa.Text()),
        sa.Column('occasion', sa.String(100)),
        sa.Column('assigned_table_id', sa.Integer(), sa.ForeignKey('restaurant_tables.id', ondelete='SET NULL')),
        sa.Column('special_event_id', sa.Integer(), sa.ForeignKey('special_events.id', ondelete='SET NULL')),
        sa.Column('estimated_duration', sa.SmallInteger(), server_default='90'),
        sa.Column('arrival_time', sa.DateTime()),
        sa.Column('departure_time', sa.DateTime()),
        sa.Column('reminder_sent', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('confirmation_code', sa.String(20), unique=True, nullable=False),
        sa.Column('source', sa.String(50), server_default='website'),
        sa.Column('menu_preferences', sa.JSON()),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        *_timestamps(),
        sa.CheckConstraint('guests >= 1', name='ck_reservations_guests_positive'),
    )

    # Create reservation_history table
    op.create_table(
        'reservation_history',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('reservation_id', sa.Integer(), sa.ForeignKey('reservations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('previous_status', reservation_status, nullable=False),
        sa.Column('new_status', reservation_status, nullable=False),
        sa.Column('changed_by_user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL')),
        sa.Column('reason', sa.Text()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    # Create waitlist table
    op.create_table(
        'waitlist',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('email', sa.String(255)),
        sa.Column('party_size', sa.SmallInteger(), nullable=False),
        sa.Column('estimated_wait_time', sa.SmallInteger()),
        sa.Column('notification_sent', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', waitlist_status, nullable=False, server_default='waiting'),
        sa.Column('notes', sa.Text()),
        sa.Column('check_in_time', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('seated_time', sa.DateTime()),
        sa.Column('left_time', sa.DateTime()),
        *_timestamps(),
    )

    # Create menu_categories table
    op.create_table(
        'menu_categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('image_url', sa.String(255)),
        *_timestamps(),
    )

    # Create menu_items table
    op.create_table(
        'menu_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('menu_categories.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('type', menu_item_type, nullable=False),
        sa.Column('image_url', sa.String(255)),
        sa.Column('ingredients', sa.JSON()),
        sa.Column('allergens', sa.JSON()),
        sa.Column('nutritional_info', sa.JSON()),
        sa.Column('is_spicy', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_vegetarian', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_vegan', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_gluten_free', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('prep_time', sa.SmallInteger()),
        *_timestamps(),
    )

    # Create restaurant_settings table
    op.create_table(
        'restaurant_settings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        *_timestamps(),
        sa.UniqueConstraint('category', 'name', name='uq_restaurant_settings_category_name'),
    )

    # Create indexes
    op.create_index('ix_restaurant_tables_dining_area_id', 'restaurant_tables', ['dining_area_id'])
    op.create_index('ix_time_slots_day_of_week', 'time_slots', ['day_of_week'])
    op.create_index('ix_reservations_user_id', 'reservations', ['user_id'])
    op.create_index('ix_reservations_date', 'reservations', ['date'])
    op.create_index('ix_reservation_history_reservation_id', 'reservation_history', ['reservation_id'])
    op.create_index('ix_waitlist_status', 'waitlist', ['status'])
    op.create_index('ix_menu_items_category_id', 'menu_items', ['category_id'])
    op.create_index('ix_restaurant_settings_category', 'restaurant_settings', ['category'])


def downgrade() -> None:
    op.drop_table('restaurant_settings')
    op.drop_table('menu_items')
    op.drop_table('menu_categories')
    op.drop_table('waitlist')
    op.drop_table('reservation_history')
    op.drop_table('reservations')
    op.drop_table('operating_hours')
    op.drop_table('time_slots')
    op.drop_table('special_events')
    op.drop_table('restaurant_tables')
    op.drop_table('dining_areas')
    op.drop_table('users')

    bind = op.get_bind()
    for enum_type in reversed(ENUMS):
        enum_type.drop(bind, checkfirst=True)
