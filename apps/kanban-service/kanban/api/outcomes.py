"""
Translation of repository outcomes into HTTP status codes.
"""
from fastapi import HTTPException, status

from kanban.db.enums import Outcome

OUTCOME_STATUS = {
    Outcome.CREATED: status.HTTP_201_CREATED,
    Outcome.UPDATED: status.HTTP_204_NO_CONTENT,
    Outcome.DELETED: status.HTTP_204_NO_CONTENT,
    Outcome.CONFLICT: status.HTTP_409_CONFLICT,
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
}

_FAILURES = {Outcome.CONFLICT, Outcome.NOT_FOUND, Outcome.BAD_REQUEST}


def raise_for_outcome(outcome: Outcome, detail: str) -> None:
    """Raise ``HTTPException`` when ``outcome`` is not a success."""
    if outcome in _FAILURES:
        raise HTTPException(status_code=OUTCOME_STATUS[outcome], detail=detail)


def ensure_matching_id(path_id: int, body_id: int) -> None:
    if path_id != body_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Path id and body id differ")
