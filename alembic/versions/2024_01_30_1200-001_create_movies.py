"""create movies

Revision ID: 001
Revises:
Create Date: 2024-01-30 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'movies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('length', sa.Integer(), nullable=True),
        sa.Column('director', sa.String(length=200), nullable=True),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('poster_url', sa.String(length=1000), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('discount', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('female_director', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_movies_title'), 'movies', ['title'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_movies_title'), table_name='movies')
    op.drop_table('movies')
