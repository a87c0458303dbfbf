"""create_profile_and_post_tables

Revision ID: 4c1d9e2a7b30
Revises:
Create Date: 2026-10-19 09:12:44.301512

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql


# revision identifiers, used by Alembic.
revision: str = '4c1d9e2a7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profile and post tables."""
    op.create_table('profile',
        sa.Column('profileId', sa.BINARY(length=16), nullable=False),
        sa.Column('profileActivationToken', sa.CHAR(length=32), nullable=True),
        sa.Column('profileEmail', sa.String(length=128), nullable=False),
        sa.Column('profileHash', sa.CHAR(length=97), nullable=False),
        sa.Column('profileUsername', sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint('profileId'),
        sa.UniqueConstraint('profileEmail'),
        sa.UniqueConstraint('profileUsername'),
    )
    # Activation looks profiles up by token
    op.create_index('ix_profile_profileActivationToken', 'profile', ['profileActivationToken'], unique=False)

    op.create_table('post',
        sa.Column('postId', sa.BINARY(length=16), nullable=False),
        sa.Column('postProfileId', sa.BINARY(length=16), nullable=False),
        sa.Column('postContent', sa.String(length=2000), nullable=False),
        sa.Column('postDate', sa.DateTime().with_variant(mysql.DATETIME(fsp=6), 'mysql'), nullable=False),
        sa.Column('postTitle', sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(['postProfileId'], ['profile.profileId'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('postId'),
    )
    op.create_index('ix_post_postProfileId', 'post', ['postProfileId'], unique=False)


def downgrade() -> None:
    """Drop post and profile tables."""
    op.drop_index('ix_post_postProfileId', table_name='post')
    op.drop_table('post')
    op.drop_index('ix_profile_profileActivationToken', table_name='profile')
    op.drop_table('profile')
