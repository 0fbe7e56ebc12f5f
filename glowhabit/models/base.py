"""Shared configuration for persisted record models."""

import uuid

from pydantic.alias_generators import to_camel

# Persisted records keep the camelCase field names of the storage format
# while Python code uses snake_case.
RECORD_CONFIG = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


def new_id() -> str:
    """Generate a short random record identifier."""
    return uuid.uuid4().hex[:13]
