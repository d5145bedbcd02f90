"""
Identifier binding: process-wide mapping from a model type to the name of
the field that uniquely identifies its instances.

Bindings are made once, at model-definition time, either explicitly:

    bind_identifier(User, "email")

or with the class decorator:

    @identifier("email")
    class User(JsonModel): ...

They are never cleared for the lifetime of the process.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

_IDENTIFIERS: Dict[type, str] = {}


def bind_identifier(model_type: type, field_name: str) -> None:
    if not isinstance(model_type, type):
        raise TypeError(f"model_type must be a class, got {model_type!r}")
    if not isinstance(field_name, str) or not field_name:
        raise ValueError("field_name must be a non-empty string")
    prev = _IDENTIFIERS.get(model_type)
    if prev is not None and prev != field_name:
        # Last write wins; callers should not rely on redeclaration.
        logger.warning(
            "Identifier of %s rebound from %r to %r", model_type.__name__, prev, field_name
        )
    _IDENTIFIERS[model_type] = field_name


def identifier(field_name: str) -> Callable[[T], T]:
    def decorate(cls: T) -> T:
        bind_identifier(cls, field_name)
        return cls
    return decorate


def get_identifier_field(model_type: type) -> Optional[str]:
    # Bindings are inherited by subclasses.
    for klass in getattr(model_type, "__mro__", ()):
        field = _IDENTIFIERS.get(klass)
        if field is not None:
            return field
    return None


def is_bound(model_type: type) -> bool:
    return get_identifier_field(model_type) is not None


def get_identifier_value(instance: Any) -> Any:
    """
    Value of the bound identifier field on a live instance, looked up via its
    runtime type. Returns None when the type is unbound or the field is unset.
    """
    field = get_identifier_field(type(instance))
    if field is None:
        return None
    if isinstance(instance, dict):
        return instance.get(field)
    return getattr(instance, field, None)
