from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, NamedTuple, Tuple

from namedsql.exception import InvalidParameterName

logger = logging.getLogger(__name__)

NAMED_PARAMETER = re.compile(r"(?<!:):([A-Za-z0-9_]+)")
INVALID_NAME_CHARACTER = re.compile(r"[^A-Za-z0-9_]")
POSITIONAL_SUB = "${}"


class PositionalSQL(NamedTuple):
    sql: str
    params: List[Any]


def validate_param_names(names: Iterable[object]) -> None:
    """Raise InvalidParameterName on the first name that is not made up
    of ASCII letters, digits and the underscore only."""
    for name in names:
        if (
            not isinstance(name, str)
            or not name
            or INVALID_NAME_CHARACTER.search(name)
        ):
            raise InvalidParameterName(name)


def find_param_names(sql: str) -> Tuple[str, ...]:
    """Unique ``:name`` tokens in order of first appearance.

    A token directly after another colon belongs to a ``::`` cast and is
    skipped, the same way the rewriter skips it.
    """
    return tuple(dict.fromkeys(NAMED_PARAMETER.findall(sql)))


def replace_named_params(
    sql: str,
    positions: Mapping[str, int],
    positional_sub: str = POSITIONAL_SUB,
) -> str:
    """Swap every ``:name`` found in ``positions`` for its positional
    marker. Names without a position are left as they are.

    Example:

        ```python
        replace_named_params("SELECT :b, :a::text", {"a": 1, "b": 2})
        # SELECT $2, $1::text
        ```
    """
    if positional_sub.startswith(":"):
        raise ValueError("positional_sub cannot begin with a colon")
    if not positions or not sql:
        return sql

    def _replace(match: re.Match) -> str:
        position = positions.get(match.group(1))
        if position is None:
            return match.group(0)
        return positional_sub.format(position)

    return NAMED_PARAMETER.sub(_replace, sql)


def convert_named_to_positional(
    sql: str,
    params: Mapping[str, Any],
    positional_sub: str = POSITIONAL_SUB,
) -> PositionalSQL:
    """Convert a query using named parameters and a mapping of names to
    values into a query using positional parameters and a list of values.

    Positions follow the iteration order of ``params``, not the order the
    names show up in ``sql``. Every key takes a slot, even when the query
    never references it.

    Raises:
        InvalidParameterName: a key holds something other than ASCII
            letters, digits and the underscore
    """
    validate_param_names(params)
    positions = {name: position for position, name in enumerate(params, 1)}
    values = [params[name] for name in positions]
    converted = replace_named_params(sql, positions, positional_sub)
    logger.debug("Converted query with %d named parameters", len(values))
    return PositionalSQL(converted, values)
