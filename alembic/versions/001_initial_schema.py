"""Initial schema - role and role_attribute.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("name", sa.String(255), primary_key=True),
    )

    # attr_values is always a JSON array; multi_valued keeps the arity
    op.create_table(
        "role_attribute",
        sa.Column(
            "role_name",
            sa.String(255),
            sa.ForeignKey("role.name", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("name", sa.String(255), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("value_type", sa.String(20), nullable=False),
        sa.Column("multi_valued", sa.Boolean(), nullable=False),
        sa.Column("attr_values", postgresql.JSONB(), nullable=False),
        sa.CheckConstraint(
            "value_type IN ('string', 'int', 'float', 'bool')",
            name="ck_role_attribute_value_type",
        ),
    )

    op.execute("INSERT INTO role (name) VALUES ('Administrator')")


def downgrade() -> None:
    op.drop_table("role_attribute")
    op.drop_table("role")
