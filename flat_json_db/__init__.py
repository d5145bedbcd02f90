from .config import StoreOptions, options_from_env
from .database import Database
from .errors import (
    DuplicateIdentifierError,
    FlatJsonDbError,
    IdentifierNotBoundError,
    StoreCorruptionError,
)
from .logging_config import setup_logging
from .model import JsonModel, dict_to_model, model_to_dict
from .registry import (
    bind_identifier,
    get_identifier_field,
    get_identifier_value,
    identifier,
    is_bound,
)

__all__ = [
    "Database",
    "StoreOptions",
    "options_from_env",
    "JsonModel",
    "dict_to_model",
    "model_to_dict",
    "bind_identifier",
    "identifier",
    "get_identifier_field",
    "get_identifier_value",
    "is_bound",
    "setup_logging",
    "FlatJsonDbError",
    "IdentifierNotBoundError",
    "DuplicateIdentifierError",
    "StoreCorruptionError",
]

__version__ = "0.1.0"
