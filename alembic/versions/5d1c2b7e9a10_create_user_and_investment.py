"""create user and investment tables

Revision ID: 5d1c2b7e9a10
Revises: 
Create Date: 2026-10-18 10:12:41.208311

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '5d1c2b7e9a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('role', sa.Enum('admin', 'viewer', name='userrole'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)
    op.create_index(op.f('ix_user_role'), 'user', ['role'], unique=False)

    op.create_table(
        'investment',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('asset_name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('asset_type', sa.Enum('startup', 'crypto_fund', 'farmland', 'collectible', 'other', name='assettype'), nullable=False),
        sa.Column('invested_amount', sa.Float(), nullable=False),
        sa.Column('current_value', sa.Float(), nullable=False),
        sa.Column('investment_date', sa.DateTime(), nullable=False),
        sa.Column('owners', sa.JSON(), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_investment_asset_type'), 'investment', ['asset_type'], unique=False)
    op.create_index(op.f('ix_investment_investment_date'), 'investment', ['investment_date'], unique=False)
    op.create_index(op.f('ix_investment_is_active'), 'investment', ['is_active'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_investment_is_active'), table_name='investment')
    op.drop_index(op.f('ix_investment_investment_date'), table_name='investment')
    op.drop_index(op.f('ix_investment_asset_type'), table_name='investment')
    op.drop_table('investment')
    op.drop_index(op.f('ix_user_role'), table_name='user')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
