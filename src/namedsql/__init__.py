from importlib.metadata import version

from .convert import (
    convert_named_to_positional,
    find_param_names,
    validate_param_names,
)
from .exception import InvalidParameterName, MissingParameter, NamedSQLError
from .query import PositionalSQL, PreparedQuery, prepare_named_as_positional

__version__ = version("namedsql")

__all__ = (
    "convert_named_to_positional",
    "find_param_names",
    "prepare_named_as_positional",
    "validate_param_names",
    "InvalidParameterName",
    "MissingParameter",
    "NamedSQLError",
    "PositionalSQL",
    "PreparedQuery",
)
