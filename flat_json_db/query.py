from __future__ import annotations
from typing import Any, Dict

OPS = {"$eq", "$ne", "$gt", "$gte", "$lt", "$lte", "$contains", "$in"}


def is_op_dict(v: Any) -> bool:
    return isinstance(v, dict) and bool(v) and all(isinstance(k, str) and k.startswith("$") for k in v)


def _compare(op: str, val: Any, arg: Any) -> bool:
    try:
        if op == "$gt":
            return val > arg
        if op == "$gte":
            return val >= arg
        if op == "$lt":
            return val < arg
        if op == "$lte":
            return val <= arg
    except TypeError:
        return False
    raise ValueError(f"unsupported operator: {op}")


def _match_ops(val: Any, ops: Dict[str, Any]) -> bool:
    for op, arg in ops.items():
        if op == "$eq":
            if val != arg:
                return False
        elif op == "$ne":
            if val == arg:
                return False
        elif op in ("$gt", "$gte", "$lt", "$lte"):
            if val is None or not _compare(op, val, arg):
                return False
        elif op == "$contains":
            # list membership, or substring for strings
            if isinstance(val, list):
                if arg not in val:
                    return False
            elif isinstance(val, str):
                if str(arg) not in val:
                    return False
            else:
                return False
        elif op == "$in":
            if not isinstance(arg, (list, tuple, set)) or val not in arg:
                return False
        else:
            raise ValueError(f"unsupported operator: {op}")
    return True


def match(obj: Dict[str, Any], query: Dict[str, Any]) -> bool:
    """
    Evaluate a simple predicate against one stored record.

    Supports:
      - equality on scalars: {"name": "Alice"}
      - nested dicts:        {"address": {"city": "Wien"}}
      - operators:           {"age": {"$gte": 18}}, {"tags": {"$contains": "x"}}
    An empty query matches everything.
    """
    for k, v in query.items():
        if k.startswith("$"):
            raise ValueError(f"unsupported top-level operator: {k}")
        if is_op_dict(v):
            if not _match_ops(obj.get(k), v):
                return False
        elif isinstance(v, dict):
            sub = obj.get(k)
            if not isinstance(sub, dict) or not match(sub, v):
                return False
        elif obj.get(k) != v:
            return False
    return True
