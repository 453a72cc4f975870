from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from talenthub.core.errors import ValidationError

logger = logging.getLogger("talenthub.store")

EntityT = TypeVar("EntityT", bound=BaseModel)


class EntityCollection(Generic[EntityT]):
    """Keyed records of one entity type with a monotonic id counter.

    Ids start at 1 and are never reset or handed out twice, deletes included.
    Every record leaving the collection through the public readers is a deep
    copy, so callers cannot mutate stored state behind the store's back.
    Absence is reported through return values: ``None`` from ``get`` and
    ``update``, ``False`` from ``delete``.
    """

    def __init__(self, name: str, model: type[EntityT]) -> None:
        self.name = name
        self._model = model
        self._records: dict[int, EntityT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._records

    def _validate(self, payload: dict[str, Any]) -> EntityT:
        try:
            return self._model.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc, f"Invalid {self.name} data") from exc

    def create(self, data: dict[str, Any]) -> EntityT:
        # The id is only consumed once the record validates.
        record = self._validate({**data, "id": self._next_id})
        self._next_id += 1
        self._records[record.id] = record
        logger.debug("record_created", extra={"entity": self.name, "entity_id": record.id})
        return record.model_copy(deep=True)

    def get(self, entity_id: int) -> EntityT | None:
        record = self._records.get(entity_id)
        return record.model_copy(deep=True) if record is not None else None

    def peek(self, entity_id: int) -> EntityT | None:
        """Stored record without copying; for read-only use inside the store."""
        return self._records.get(entity_id)

    def list(self) -> list[EntityT]:
        return [record.model_copy(deep=True) for record in self._records.values()]

    def find(self, predicate: Callable[[EntityT], bool]) -> list[EntityT]:
        return [record.model_copy(deep=True) for record in self._records.values() if predicate(record)]

    def iter_records(self) -> Iterator[EntityT]:
        return iter(list(self._records.values()))

    def update(self, entity_id: int, changes: dict[str, Any]) -> EntityT | None:
        existing = self._records.get(entity_id)
        if existing is None:
            return None
        merged = self._validate({**existing.model_dump(), **changes, "id": entity_id})
        self._records[entity_id] = merged
        logger.debug(
            "record_updated",
            extra={"entity": self.name, "entity_id": entity_id, "fields": sorted(changes)},
        )
        return merged.model_copy(deep=True)

    def delete(self, entity_id: int) -> bool:
        removed = self._records.pop(entity_id, None)
        if removed is None:
            return False
        logger.debug("record_deleted", extra={"entity": self.name, "entity_id": entity_id})
        return True
