from __future__ import annotations
from typing import Any, Dict, Optional, Type, TypeVar

from .registry import get_identifier_field, get_identifier_value

M = TypeVar("M")


def model_to_dict(instance: Any) -> Dict[str, Any]:
    """Shallow dict of the instance's own fields, as written to the document file."""
    if isinstance(instance, dict):
        return dict(instance)
    if hasattr(instance, "__dict__"):
        return dict(vars(instance))
    # __slots__ classes
    out: Dict[str, Any] = {}
    for klass in type(instance).__mro__:
        for name in getattr(klass, "__slots__", ()):
            if hasattr(instance, name):
                out[name] = getattr(instance, name)
    return out


def dict_to_model(model_type: Type[M], obj: Dict[str, Any]) -> M:
    """
    Permissive shallow reconstruction: build a model_type value without running
    __init__ and copy every key of obj onto it verbatim. Keys unknown to the
    class pass through; missing keys fall back to class-level defaults.
    """
    if not isinstance(obj, dict):
        raise TypeError(f"expected a JSON object, got {type(obj).__name__}")
    inst = model_type.__new__(model_type)
    if isinstance(inst, dict):
        dict.update(inst, obj)
        return inst
    if hasattr(inst, "__dict__"):
        inst.__dict__.update(obj)
    else:
        for k, v in obj.items():
            setattr(inst, k, v)
    return inst


class JsonModel:
    """
    Optional base class for stored models. Subclasses still have to bind their
    identifier field (see registry.identifier / registry.bind_identifier).
    """

    def __init__(self, **fields: Any) -> None:
        for k, v in fields.items():
            setattr(self, k, v)

    @property
    def identifier_field_name(self) -> Optional[str]:
        return get_identifier_field(type(self))

    @property
    def identifier_value(self) -> Any:
        return get_identifier_value(self)

    def to_json(self) -> Dict[str, Any]:
        return model_to_dict(self)

    @classmethod
    def from_json(cls: Type[M], obj: Dict[str, Any]) -> M:
        return dict_to_model(cls, obj)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_json() == other.to_json()  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v!r}" for k, v in self.to_json().items())
        return f"{type(self).__name__}({body})"
