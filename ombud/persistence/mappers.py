"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from ombud.domain.model import Complaint, Petition
from ombud.domain.value import (
    ComplaintId,
    ComplaintStatus,
    PetitionId,
    PetitionStatus,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _user_ids(values: Any) -> tuple[UserId, ...]:
    return tuple(UserId(_uuid(v)) for v in values or ())


def row_to_complaint(row: Dict[str, Any]) -> Complaint:
    """Convert database row to Complaint domain model.

    Args:
        row: Database row as dict

    Returns:
        Complaint domain model
    """
    return Complaint(
        id=ComplaintId(_uuid(row["id"])),
        text=row["text"],
        tags=tuple(row.get("tags") or ()),
        status=ComplaintStatus(row["status"]),
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        score=row["score"],
        upvoter_ids=_user_ids(row["upvoter_ids"]),
        downvoter_ids=_user_ids(row["downvoter_ids"]),
        comment_count=row.get("comment_count", 0),
        created_at=row["created_at"],
        reviewed_at=row.get("reviewed_at"),
        admin_notes=row.get("admin_notes"),
    )


def complaint_to_dict(complaint: Complaint) -> Dict[str, Any]:
    """Convert Complaint domain model to database dict.

    Args:
        complaint: Complaint domain model

    Returns:
        Dict suitable for database insertion
    """
    data = complaint.model_dump()
    data["status"] = complaint.status.value
    data["tags"] = list(complaint.tags)
    data["upvoter_ids"] = list(complaint.upvoter_ids)
    data["downvoter_ids"] = list(complaint.downvoter_ids)
    return data


def row_to_petition(row: Dict[str, Any]) -> Petition:
    """Convert database row to Petition domain model."""
    return Petition(
        id=PetitionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        demands=row["demands"],
        creator_id=UserId(_uuid(row["creator_id"])),
        tags=tuple(row.get("tags") or ()),
        status=PetitionStatus(row["status"]),
        goal=row.get("goal"),
        deadline=row.get("deadline"),
        signer_ids=_user_ids(row["signer_ids"]),
        signature_count=row["signature_count"],
        created_at=row["created_at"],
        approved_at=row.get("approved_at"),
        rejected_at=row.get("rejected_at"),
        closed_at=row.get("closed_at"),
        admin_notes=row.get("admin_notes"),
    )


def petition_to_dict(petition: Petition) -> Dict[str, Any]:
    """Convert Petition domain model to database dict."""
    data = petition.model_dump()
    data["status"] = petition.status.value
    data["tags"] = list(petition.tags)
    data["signer_ids"] = list(petition.signer_ids)
    return data
