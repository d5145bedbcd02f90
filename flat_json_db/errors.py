from __future__ import annotations
from typing import Any


class FlatJsonDbError(Exception):
    """Base class for every error raised by flat_json_db itself."""


class IdentifierNotBoundError(FlatJsonDbError, TypeError):
    def __init__(self, model_type: type) -> None:
        self.model_type = model_type
        super().__init__(f"Model {getattr(model_type, '__name__', model_type)} has no Identifier")


class DuplicateIdentifierError(FlatJsonDbError, ValueError):
    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"Model with identifier {identifier} already exists.")


class StoreCorruptionError(FlatJsonDbError, ValueError):
    """Document file parsed, but its top-level value is not a JSON array."""
