from fastapi import Request

from talenthub.core.errors import ValidationError
from talenthub.store.memory import RecruitmentStore


def get_store(request: Request) -> RecruitmentStore:
    return request.app.state.store


def parse_id(raw: str, entity: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {entity} ID") from None
