"""init: lists and todos

Revision ID: 20220907015905
Revises:
Create Date: 2022-09-07 01:59:05
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20220907015905"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _existing_tables() -> set[str]:
    # offline (--sql) runs have no connection to inspect
    if op.get_context().as_sql:
        return set()
    return set(sa.inspect(op.get_bind()).get_table_names())


def upgrade() -> None:
    # databases created by the previous server already hold these tables
    existing = _existing_tables()
    if "lists" not in existing:
        op.create_table(
            "lists",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("name", sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint("id"),
        )
    if "todos" not in existing:
        op.create_table(
            "todos",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("text", sa.Text(), nullable=False),
            sa.Column("checked", sa.Boolean(), server_default=sa.false(), nullable=False),
            sa.Column("list_id", sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(["list_id"], ["lists.id"]),
            sa.PrimaryKeyConstraint("id"),
        )


def downgrade() -> None:
    op.drop_table("todos")
    op.drop_table("lists")
