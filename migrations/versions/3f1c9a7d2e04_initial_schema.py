"""initial_schema

Create the schema for Ombud:
- Complaints (anonymous, moderated, up/down voting with voter sets)
- Petitions (moderated, one-directional signing)

Vote tallies are checked against the voter arrays by constraints, so a
write that would break them fails instead of landing.

Revision ID: 3f1c9a7d2e04
Revises:
Create Date: 2026-10-18 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2e04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # COMPLAINTS table
    # ========================================================================
    op.create_table(
        "complaints",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "upvoter_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "downvoter_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="complaint_status_valid",
        ),
        sa.CheckConstraint(
            "upvote_count = cardinality(upvoter_ids)",
            name="upvote_count_matches_voters",
        ),
        sa.CheckConstraint(
            "downvote_count = cardinality(downvoter_ids)",
            name="downvote_count_matches_voters",
        ),
        sa.CheckConstraint(
            "score = upvote_count - downvote_count", name="score_is_net_votes"
        ),
        sa.CheckConstraint(
            "NOT (upvoter_ids && downvoter_ids)", name="voter_sets_are_disjoint"
        ),
    )
    op.create_index(
        "idx_complaints_status_created_at",
        "complaints",
        ["status", sa.text("created_at DESC")],
    )
    op.create_index("idx_complaints_score", "complaints", ["score"])

    # ========================================================================
    # PETITIONS table
    # ========================================================================
    op.create_table(
        "petitions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("demands", sa.Text(), nullable=False),
        sa.Column("creator_id", sa.UUID(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("goal", sa.Integer(), nullable=True),
        sa.Column("deadline", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "signer_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("signature_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("approved_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("rejected_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("closed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected', 'closed')",
            name="petition_status_valid",
        ),
        sa.CheckConstraint(
            "signature_count = cardinality(signer_ids)",
            name="signature_count_matches_signers",
        ),
        sa.CheckConstraint("goal IS NULL OR goal >= 1", name="goal_positive"),
    )
    op.create_index("idx_petitions_status", "petitions", ["status"])
    op.create_index(
        "idx_petitions_signature_count", "petitions", ["signature_count"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_petitions_signature_count", table_name="petitions")
    op.drop_index("idx_petitions_status", table_name="petitions")
    op.drop_table("petitions")

    op.drop_index("idx_complaints_score", table_name="complaints")
    op.drop_index("idx_complaints_status_created_at", table_name="complaints")
    op.drop_table("complaints")
