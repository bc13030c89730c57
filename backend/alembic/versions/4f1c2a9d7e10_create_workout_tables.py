"""create workouts/exercises/workout_exercises/sets

Revision ID: 4f1c2a9d7e10
Revises:
Create Date: 2026-10-17 09:12:40.118204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade() -> None:
    # 1) workouts, owned by an external user identity
    op.create_table(
        'workouts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.String(length=255), nullable=False, index=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('started_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False, index=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )

    # 2) shared exercise catalogue
    op.create_table(
        'exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_timestamps(),
    )

    # 3) exercises within a workout; removed with either parent
    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_id', sa.Uuid(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    # 4) sets
    op.create_table(
        'sets',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_exercise_id', sa.Uuid(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Numeric(10, 2), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('sets')
    op.drop_table('workout_exercises')
    op.drop_table('exercises')
    op.drop_table('workouts')
