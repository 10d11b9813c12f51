"""Create the instance records table.

Revision ID: 001_instance_records
Revises:
Create Date: 2026-10-18

One row per (instanceId, username) with the document-shaped columns.
The table name follows DB_COLLECTION.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from availability.config import get_settings


# revision identifiers, used by Alembic.
revision: str = '001_instance_records'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    table = get_settings().db_collection
    op.create_table(
        table,
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('instanceId', sa.String(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('binaryWeeks', sa.String(), nullable=False),
        sa.Column('creationDate', sa.String(10), nullable=False),
        sa.UniqueConstraint(
            'instanceId', 'username', name=f'uq_{table}_instance_username',
        ),
    )
    op.create_index(f'ix_{table}_instance_id', table, ['instanceId'])


def downgrade() -> None:
    table = get_settings().db_collection
    op.drop_index(f'ix_{table}_instance_id', table_name=table)
    op.drop_table(table)
