"""create_team_and_member

Revision ID: b7e1c2a94d10
Revises:
Create Date: 2026-10-19 10:00:00.000000

팀(team) 및 회원(member) 테이블 생성.
Create team and member tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b7e1c2a94d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # team — 회원 그룹 (Member groups)
    op.create_table(
        'team',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
    )

    # member — 회원, 팀은 선택 (Members, team optional)
    op.create_table(
        'member',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('team.id', ondelete='SET NULL'), nullable=True),
    )

    # 인덱스 — Index for the member → team join
    op.create_index('ix_member_team_id', 'member', ['team_id'])


def downgrade() -> None:
    op.drop_index('ix_member_team_id', table_name='member')
    op.drop_table('member')
    op.drop_table('team')
