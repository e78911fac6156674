"""Serialization hook shared by every core entity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic_core import to_json, to_jsonable_python


class Serializable(ABC):
    """Entity that exposes a read-only view convertible to JSON.

    ``data_to_be_serialized`` returns pydantic models, lists, tuples,
    enums or primitives; the JSON helpers render that view with
    ``pydantic_core``.
    """

    @abstractmethod
    def data_to_be_serialized(self) -> Any:
        """Return the data to be serialized."""

    def to_jsonable(self) -> Any:
        """Return the serialized view as plain JSON-compatible Python."""
        return to_jsonable_python(self.data_to_be_serialized(), by_alias=True)

    def to_json(self) -> str:
        return to_json(self.data_to_be_serialized(), by_alias=True).decode()
