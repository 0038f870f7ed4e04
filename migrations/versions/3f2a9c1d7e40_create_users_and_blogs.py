"""Create users and blogs tables

Revision ID: 3f2a9c1d7e40
Revises:
Create Date: 2025-09-07 09:45:21.606290

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f2a9c1d7e40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('api_token_hash', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_api_token_hash', 'users', ['api_token_hash'], unique=True)

    op.create_table(
        'blogs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('article', sa.Text(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('verified', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_blogs_user_id', 'blogs', ['user_id'], unique=False)
    # Public listing filters on verified and sorts newest first
    op.create_index('ix_blogs_verified_created_at', 'blogs', ['verified', 'created_at'], unique=False)


def downgrade():
    op.drop_index('ix_blogs_verified_created_at', table_name='blogs')
    op.drop_index('ix_blogs_user_id', table_name='blogs')
    op.drop_table('blogs')
    op.drop_index('ix_users_api_token_hash', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
