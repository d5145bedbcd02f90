from __future__ import annotations
import json
import os
from datetime import date
from typing import Any, Dict, List, Optional

from .errors import StoreCorruptionError

BACKUP_SUFFIX = ".json"


def dump_array(items: List[Dict[str, Any]]) -> str:
    return json.dumps(items, ensure_ascii=False)


def replace_text(path: str, data: str) -> None:
    """Write data into a temp file next to path, then os.replace it over path."""
    tmp_path = path + ".tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(data)
        os.replace(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


class FileStorage:
    """
    Whole-file I/O for a document file holding one JSON array.
    Every read parses the full file; every write replaces it.
    """
    def __init__(self, path: str) -> None:
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def read_array(self) -> List[Dict[str, Any]]:
        # Missing file and malformed JSON propagate as-is (FileNotFoundError / JSONDecodeError).
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.loads(f.read())
        if not isinstance(data, list):
            raise StoreCorruptionError(f"{self.path}: top-level JSON value is not an array")
        return data

    def write_array(self, items: List[Dict[str, Any]]) -> None:
        # Serialize before touching the file so an unserializable value leaves it intact.
        replace_text(self.path, dump_array(items))

    def remove(self) -> bool:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            return False
        return True


class BackupMirror:
    """
    Write-only dated copy of the document file: {prefix}{YYYY-MM-DD}.json.
    The prefix is a partial path, not a directory; retention is up to the caller.
    """
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def path_for(self, day: Optional[date] = None) -> str:
        day = day or date.today()
        return f"{self.prefix}{day.isoformat()}{BACKUP_SUFFIX}"

    def write(self, items: List[Dict[str, Any]]) -> str:
        path = self.path_for()
        replace_text(path, dump_array(items))
        return path
