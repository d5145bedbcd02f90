"""
Construction flags for Database, with an environment-variable loader so
scripts can toggle logging or backups without code changes.
"""
from __future__ import annotations
import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

ENV_PREFIX = "FLAT_JSON_DB_"


@dataclass(frozen=True)
class StoreOptions:
    logs: bool = False               # informational records
    warns: bool = True               # cautionary records
    has_unique: bool = True          # enforce identifier uniqueness
    create_if_missing: bool = True   # create the document file as []
    backup_prefix: str = ""          # "" disables the dated backup mirror

    @property
    def backup_enabled(self) -> bool:
        return self.backup_prefix != ""

    def replace(self, **overrides: Any) -> "StoreOptions":
        unknown = set(overrides) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise TypeError(f"unknown store option(s): {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **overrides)


def _bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def options_from_env(prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> StoreOptions:
    """Read <prefix>LOGS, WARNS, UNIQUE, CREATE and BACKUP_PREFIX."""
    env = os.environ if environ is None else environ
    d = StoreOptions()
    return StoreOptions(
        logs=_bool(env.get(prefix + "LOGS"), d.logs),
        warns=_bool(env.get(prefix + "WARNS"), d.warns),
        has_unique=_bool(env.get(prefix + "UNIQUE"), d.has_unique),
        create_if_missing=_bool(env.get(prefix + "CREATE"), d.create_if_missing),
        backup_prefix=env.get(prefix + "BACKUP_PREFIX", d.backup_prefix),
    )
