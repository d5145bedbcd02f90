from __future__ import annotations
import logging
import os
from datetime import date
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union

from .config import StoreOptions
from .errors import DuplicateIdentifierError, IdentifierNotBoundError
from .model import dict_to_model, model_to_dict
from .query import match
from .registry import get_identifier_field, get_identifier_value
from .storage import BackupMirror, FileStorage

logger = logging.getLogger(__name__)

M = TypeVar("M")
PathLike = Union[str, "os.PathLike[str]"]


class Database(Generic[M]):
    """
    Flat-file document store for one model type.

    The document file holds a JSON array of records. Every operation reads and
    parses the whole file; every mutation rewrites the whole file and, when a
    backup prefix is configured, mirrors it to {prefix}{YYYY-MM-DD}.json.
    There is no locking: one writer per file.
    """

    def __init__(
        self,
        path: PathLike,
        model_type: Type[M],
        options: Optional[StoreOptions] = None,
        *,
        decoder: Optional[Callable[[Dict[str, Any]], M]] = None,
        **overrides: Any,
    ) -> None:
        field = get_identifier_field(model_type)
        if field is None:
            raise IdentifierNotBoundError(model_type)
        self.path = os.fspath(path)
        self.model_type = model_type
        self.identifier_field: str = field
        base = options or StoreOptions()
        self.options = base.replace(**overrides) if overrides else base
        self._decoder = decoder or self._default_decoder(model_type)
        self._fs = FileStorage(self.path)
        self._backup = BackupMirror(self.options.backup_prefix) if self.options.backup_enabled else None

        if not self._fs.exists() and self.options.create_if_missing:
            self._fs.write_array([])
            if self._backup is not None:
                self._backup.write([])
        self._info("Database initialized for model %s at %s", model_type.__name__, self.path)

    def __repr__(self) -> str:
        return f"Database({self.path!r}, {self.model_type.__name__}, id={self.identifier_field!r})"

    # ----- public API -----

    @property
    def exists(self) -> bool:
        return self._fs.exists()

    def backup_path(self, day: Optional[date] = None) -> Optional[str]:
        if self._backup is None:
            return None
        return self._backup.path_for(day)

    def find_all(self) -> List[M]:
        return [m for _raw, m in self._load()]

    def find(self, query: Dict[str, Any]) -> List[M]:
        """Linear scan over every stored record; see query.match for the predicate language."""
        return [m for raw, m in self._load() if match(raw, query)]

    def count(self) -> int:
        return len(self._fs.read_array())

    def find_by_id(self, rec_id: Any) -> Optional[M]:
        if not self.options.has_unique:
            self._warn("find_by_id is not called because uniqueness is disabled and identifier can't be existing.")
            return None
        for _raw, m in self._load():
            if get_identifier_value(m) == rec_id:
                return m
        return None

    def save(self, model: M) -> None:
        loaded = self._load()
        rec_id = get_identifier_value(model)
        if self.options.has_unique:
            if any(get_identifier_value(m) == rec_id for _raw, m in loaded):
                raise DuplicateIdentifierError(rec_id)
        else:
            self._warn("save called but uniqueness is disabled. This may lead to duplicate identifiers.")

        if not (self._fs.exists() or self.options.create_if_missing):
            self._warn(
                "File %s does not exist and create_if_missing is false. Model not saved.", self.path
            )
            return
        self._persist([raw for raw, _m in loaded] + [self._encode(model)])
        self._info("Model with identifier %s saved.", rec_id)

    def save_or_update(self, model: M) -> None:
        existing = self.find_by_id(get_identifier_value(model))
        if self.options.has_unique and existing is not None:
            self.update(model)
        else:
            self.save(model)
        if not self.options.has_unique:
            self._warn(
                "save_or_update called but uniqueness is disabled. "
                "You can't update existing models reliably but you can save."
            )

    def update(self, model: M) -> None:
        if not self.options.has_unique:
            self._warn("update is not called because uniqueness is disabled.")
            return
        rec_id = get_identifier_value(model)
        existing = self.find_by_id(rec_id)
        if existing is None:
            self._warn("Model with identifier %s not found for update.", rec_id)
            return
        # Shallow overlay: fields of the new model win, identifier included.
        merged = {**self._encode(existing), **self._encode(model)}
        kept = [raw for raw, m in self._load() if get_identifier_value(m) != rec_id]
        kept.append(merged)
        self._persist(kept)
        self._info("Model with identifier %s updated.", rec_id)

    def delete(self, rec_id: Any) -> None:
        if not self.options.has_unique:
            self._warn("delete called but uniqueness is disabled because identifier can't be existing.")
            return
        # Direct field access, not the identifier accessor.
        kept = [raw for raw, m in self._load() if self._field_value(m) != rec_id]
        self._persist(kept)
        self._info("Model with identifier %s deleted.", rec_id)

    def unregister_model(self) -> None:
        """Delete the document file. Backups and the identifier binding are kept."""
        self._fs.remove()
        self._info("Database unregistered for model %s at %s", self.model_type.__name__, self.path)

    # ----- internals -----

    @staticmethod
    def _default_decoder(model_type: Type[M]) -> Callable[[Dict[str, Any]], M]:
        from_json = getattr(model_type, "from_json", None)
        if callable(from_json):
            return from_json
        return lambda obj: dict_to_model(model_type, obj)

    def _load(self) -> List[Tuple[Dict[str, Any], M]]:
        return [(raw, self._decoder(raw)) for raw in self._fs.read_array()]

    def _encode(self, model: Any) -> Dict[str, Any]:
        to_json = getattr(model, "to_json", None)
        if callable(to_json):
            return dict(to_json())
        return model_to_dict(model)

    def _field_value(self, model: Any) -> Any:
        if isinstance(model, dict):
            return model.get(self.identifier_field)
        return getattr(model, self.identifier_field, None)

    def _persist(self, items: List[Dict[str, Any]]) -> None:
        # Primary first, then the mirror; the two writes are not atomic together.
        self._fs.write_array(items)
        if self._backup is not None:
            self._backup.write(items)

    def _info(self, msg: str, *args: Any) -> None:
        if self.options.logs:
            logger.info(msg, *args)

    def _warn(self, msg: str, *args: Any) -> None:
        if self.options.warns or self.options.logs:
            logger.warning(msg, *args)
