"""Keyed in-memory record stores and tolerant (de)serialization.

Every store keeps its records in a dict keyed by the record's uniqueness
key, so an upsert replaces the previous record for that key. Loading never
raises: absent or corrupt JSON yields an empty store and records that fail
validation are skipped one by one.
"""

import json
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, Hashable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)
M = TypeVar("M", bound=BaseModel)

GetItem = Callable[[str], Optional[str]]


def parse_json(raw: Optional[str], key: str) -> Any:
    """Decode a stored JSON string, returning None when absent or corrupt."""
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Discarding corrupt data in %s: %s", key, e)
        return None


def dump_records(records: Iterable[BaseModel]) -> str:
    return json.dumps(
        [r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in records],
        ensure_ascii=False,
    )


def validate_records(items: Any, model: type[M], key: str) -> list[M]:
    """Validate a decoded JSON list item by item, skipping invalid records."""
    if items is None:
        return []
    if not isinstance(items, list):
        logger.warning("Expected a list in %s, got %s", key, type(items).__name__)
        return []

    records = []
    for index, item in enumerate(items):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping invalid record %d in %s: %d error(s)", index, key, e.error_count())
    return records


def load_records(raw: Optional[str], model: type[M], key: str) -> list[M]:
    return validate_records(parse_json(raw, key), model, key)


def load_object(raw: Optional[str], model: type[M], key: str) -> M:
    """Load a single object merged over the model's defaults.

    Fields that fail validation fall back to their default values.
    """
    default = model()
    data = parse_json(raw, key)
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Expected an object in %s, got %s", key, type(data).__name__)
        return default

    defaults = default.model_dump(mode="json", by_alias=True)
    merged = {**defaults, **data}
    try:
        return model.model_validate(merged)
    except ValidationError as e:
        invalid = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.warning("Resetting invalid fields in %s: %s", key, ", ".join(sorted(map(str, invalid))))

    repaired = {k: v for k, v in merged.items() if k not in invalid}
    repaired.update({k: defaults[k] for k in invalid if k in defaults})
    try:
        return model.model_validate(repaired)
    except ValidationError:
        logger.warning("Falling back to defaults for %s", key)
        return default


K = TypeVar("K", bound=Hashable)


class RecordStore(Generic[K, R]):
    """Single-bucket store of records keyed by a uniqueness key.

    Subclasses set ``STORAGE_KEY`` and ``model`` and implement ``key_of``.
    """

    STORAGE_KEY: str = ""
    model: type[R]

    def __init__(self, records: Iterable[R] = ()):
        self._records: dict[K, R] = {}
        for record in records:
            self._put(record)

    def key_of(self, record: R) -> K:
        raise NotImplementedError

    def _put(self, record: R) -> R:
        self._records[self.key_of(record)] = record
        return record

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.all())

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def all(self) -> list[R]:
        """All records ordered by key."""
        return [self._records[key] for key in sorted(self._records)]

    def to_json(self) -> str:
        return dump_records(self.all())

    @classmethod
    def from_json(cls, raw: Optional[str]):
        return cls(load_records(raw, cls.model, cls.STORAGE_KEY))

    @classmethod
    def load(cls, get_item: GetItem):
        """Build the store from a key-value reader."""
        return cls.from_json(get_item(cls.STORAGE_KEY))

    def dump(self) -> dict[str, str]:
        """Serialized buckets keyed by storage key."""
        return {self.STORAGE_KEY: self.to_json()}
