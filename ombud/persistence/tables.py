"""SQLAlchemy table definitions for Ombud.

These table definitions are used with SQLAlchemy Core statements.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMPLAINTS TABLE
# ============================================================================
complaints_table = Table(
    "complaints",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("upvoter_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvoter_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("admin_notes", Text, nullable=True),
    CheckConstraint(
        "status IN ('pending', 'approved', 'rejected')", name="complaint_status_valid"
    ),
    # Vote tallies always agree with the voter sets
    CheckConstraint(
        "upvote_count = cardinality(upvoter_ids)", name="upvote_count_matches_voters"
    ),
    CheckConstraint(
        "downvote_count = cardinality(downvoter_ids)",
        name="downvote_count_matches_voters",
    ),
    CheckConstraint("score = upvote_count - downvote_count", name="score_is_net_votes"),
    CheckConstraint(
        "NOT (upvoter_ids && downvoter_ids)", name="voter_sets_are_disjoint"
    ),
)

Index(
    "idx_complaints_status_created_at",
    complaints_table.c.status,
    complaints_table.c.created_at.desc(),
)
Index("idx_complaints_score", complaints_table.c.score)

# ============================================================================
# PETITIONS TABLE
# ============================================================================
petitions_table = Table(
    "petitions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(150), nullable=False),
    Column("description", Text, nullable=False),
    Column("demands", Text, nullable=False),
    Column("creator_id", UUID, nullable=False),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("goal", Integer, nullable=True),
    Column("deadline", TIMESTAMP(timezone=True), nullable=True),
    Column("signer_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("signature_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("approved_at", TIMESTAMP(timezone=True), nullable=True),
    Column("rejected_at", TIMESTAMP(timezone=True), nullable=True),
    Column("closed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("admin_notes", Text, nullable=True),
    CheckConstraint(
        "status IN ('pending', 'approved', 'rejected', 'closed')",
        name="petition_status_valid",
    ),
    CheckConstraint(
        "signature_count = cardinality(signer_ids)",
        name="signature_count_matches_signers",
    ),
    CheckConstraint("goal IS NULL OR goal >= 1", name="goal_positive"),
)

Index("idx_petitions_status", petitions_table.c.status)
Index("idx_petitions_signature_count", petitions_table.c.signature_count)
