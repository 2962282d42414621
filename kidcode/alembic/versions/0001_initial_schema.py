"""users, lessons, quizzes, progress, achievements, user_achievements

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('email', name='uq_user_email'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table(
        'lessons',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('language', sa.String(length=50), nullable=False, server_default='KidCode'),
        sa.Column('topic', sa.String(length=100), nullable=False, server_default='Basics'),
    )
    op.create_index('ix_lessons_id', 'lessons', ['id'])
    op.create_index('ix_lessons_title', 'lessons', ['title'])
    op.create_index('ix_lessons_language', 'lessons', ['language'])
    op.create_index('ix_lessons_topic', 'lessons', ['topic'])

    op.create_table(
        'quizzes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('lesson_id', sa.Integer(), sa.ForeignKey('lessons.id', ondelete='CASCADE'), nullable=False),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('options', sa.JSON(), nullable=False),
        sa.Column('answer_index', sa.Integer(), nullable=False),
        sa.CheckConstraint('answer_index >= 0', name='ck_quiz_answer_index_non_negative'),
    )
    op.create_index('ix_quizzes_id', 'quizzes', ['id'])
    op.create_index('ix_quizzes_lesson_id', 'quizzes', ['lesson_id'])

    op.create_table(
        'progress',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('lesson_id', sa.Integer(), sa.ForeignKey('lessons.id', ondelete='CASCADE'), nullable=False),
        sa.Column('started', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('score', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'lesson_id', name='uq_progress_user_lesson'),
    )
    op.create_index('ix_progress_id', 'progress', ['id'])
    op.create_index('ix_progress_user_id', 'progress', ['user_id'])

    op.create_table(
        'achievements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('code', sa.String(length=100), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.UniqueConstraint('code', name='uq_achievement_code'),
    )
    op.create_index('ix_achievements_id', 'achievements', ['id'])
    op.create_index('ix_achievements_code', 'achievements', ['code'])

    op.create_table(
        'user_achievements',
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('achievement_id', sa.Integer(), sa.ForeignKey('achievements.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('unlocked_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table('user_achievements')
    op.drop_index('ix_achievements_code', table_name='achievements')
    op.drop_index('ix_achievements_id', table_name='achievements')
    op.drop_table('achievements')
    op.drop_index('ix_progress_user_id', table_name='progress')
    op.drop_index('ix_progress_id', table_name='progress')
    op.drop_table('progress')
    op.drop_index('ix_quizzes_lesson_id', table_name='quizzes')
    op.drop_index('ix_quizzes_id', table_name='quizzes')
    op.drop_table('quizzes')
    op.drop_index('ix_lessons_topic', table_name='lessons')
    op.drop_index('ix_lessons_language', table_name='lessons')
    op.drop_index('ix_lessons_title', table_name='lessons')
    op.drop_index('ix_lessons_id', table_name='lessons')
    op.drop_table('lessons')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
