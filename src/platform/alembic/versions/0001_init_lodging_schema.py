"""init_lodging_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- user / session: accounts and login sessions (session.token backs the JWT check)
- hotel / room: hotel catalog, room.capacity > 0
- enrollment / address: attendee registration data
- ticket_type / ticket: event tickets (status RESERVED | PAID)
- booking: one hotel room booking per user (unique booking.user_id)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create all lodging tables."""

    # ========== Accounts ==========

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'session',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('token', sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_session_user_id'), 'session', ['user_id'], unique=False)
    op.create_index(op.f('ix_session_token'), 'session', ['token'], unique=False)

    # ========== Hotel catalog ==========

    op.create_table(
        'hotel',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'room',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('hotel_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('capacity > 0', name='ck_room_capacity_positive'),
        sa.ForeignKeyConstraint(['hotel_id'], ['hotel.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_room_hotel_id'), 'room', ['hotel_id'], unique=False)

    # ========== Enrollment ==========

    op.create_table(
        'enrollment',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('cpf', sa.String(length=20), nullable=False),
        sa.Column('birthday', sa.DateTime(timezone=True), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )

    op.create_table(
        'address',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('enrollment_id', sa.Integer(), nullable=False),
        sa.Column('cep', sa.String(length=20), nullable=False),
        sa.Column('street', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('state', sa.String(length=255), nullable=False),
        sa.Column('number', sa.String(length=20), nullable=False),
        sa.Column('neighborhood', sa.String(length=255), nullable=False),
        sa.Column('address_detail', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['enrollment_id'], ['enrollment.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_address_enrollment_id'), 'address', ['enrollment_id'], unique=False)

    # ========== Tickets ==========

    op.create_table(
        'ticket_type',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('is_remote', sa.Boolean(), nullable=False),
        sa.Column('includes_hotel', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'ticket',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('enrollment_id', sa.Integer(), nullable=False),
        sa.Column('ticket_type_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['enrollment_id'], ['enrollment.id']),
        sa.ForeignKeyConstraint(['ticket_type_id'], ['ticket_type.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('enrollment_id'),
    )
    op.create_index(op.f('ix_ticket_ticket_type_id'), 'ticket', ['ticket_type_id'], unique=False)

    # ========== Booking ==========

    op.create_table(
        'booking',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.ForeignKeyConstraint(['room_id'], ['room.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', name='uq_booking_user_id'),
    )
    op.create_index(op.f('ix_booking_room_id'), 'booking', ['room_id'], unique=False)


def downgrade() -> None:
    """Drop all lodging tables."""
    op.drop_index(op.f('ix_booking_room_id'), table_name='booking')
    op.drop_table('booking')
    op.drop_index(op.f('ix_ticket_ticket_type_id'), table_name='ticket')
    op.drop_table('ticket')
    op.drop_table('ticket_type')
    op.drop_index(op.f('ix_address_enrollment_id'), table_name='address')
    op.drop_table('address')
    op.drop_table('enrollment')
    op.drop_index(op.f('ix_room_hotel_id'), table_name='room')
    op.drop_table('room')
    op.drop_table('hotel')
    op.drop_index(op.f('ix_session_token'), table_name='session')
    op.drop_index(op.f('ix_session_user_id'), table_name='session')
    op.drop_table('session')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
