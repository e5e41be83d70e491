from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from namedsql.convert import (
    POSITIONAL_SUB,
    PositionalSQL,
    find_param_names,
    replace_named_params,
    validate_param_names,
)
from namedsql.exception import MissingParameter

logger = logging.getLogger(__name__)


class PreparedQuery:
    """A query rewritten once to positional parameters, along with the
    parameter names in marker order. Bind it as many times as needed.

    Instances are immutable.
    """

    __slots__ = ("_sql", "_param_names")
    _sql: str
    _param_names: Tuple[str, ...]

    def __init__(self, sql: str, param_names: Iterable[str]) -> None:
        object.__setattr__(self, "_sql", sql)
        object.__setattr__(self, "_param_names", tuple(param_names))

    @property
    def sql(self) -> str:
        return self._sql

    @property
    def param_names(self) -> Tuple[str, ...]:
        return self._param_names

    def convert_params(self, params: Mapping[str, Any]) -> List[Any]:
        """Values from ``params`` in positional order. Keys that are not
        one of the parameter names are ignored.

        Raises:
            MissingParameter: one of the parameter names has no value
        """
        values = []
        for name in self._param_names:
            if name not in params:
                raise MissingParameter(name)
            values.append(params[name])
        return values

    def to_positional_sql(self, params: Mapping[str, Any]) -> PositionalSQL:
        return PositionalSQL(self._sql, self.convert_params(params))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"{self.__class__.__name__} is immutable, cannot set {name}"
        )

    def __delattr__(self, name: str) -> None:
        raise AttributeError(
            f"{self.__class__.__name__} is immutable, cannot delete {name}"
        )

    def __str__(self) -> str:
        return (
            f"<{self.__class__.__name__} sql={self._sql[:6]}... "
            f"param_names={', '.join(self._param_names)}>"
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(sql={self._sql!r}, "
            f"param_names={self._param_names!r})"
        )

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, PreparedQuery)
            and self._sql == other._sql
            and self._param_names == other._param_names
        )

    def __hash__(self) -> int:
        return hash((self._sql, self._param_names))


def prepare_named_as_positional(
    sql: str,
    param_names: Optional[Iterable[str]] = None,
    positional_sub: str = POSITIONAL_SUB,
) -> PreparedQuery:
    """Rewrite ``sql`` once so it can be bound many times.

    When ``param_names`` is omitted, the names are picked up from ``sql``
    in order of first appearance. Otherwise their order decides the
    positions, and repeated names count once.

    Raises:
        InvalidParameterName: one of the names holds something other
            than ASCII letters, digits and the underscore
    """
    if param_names is None:
        names = find_param_names(sql)
    else:
        if isinstance(param_names, str):
            raise TypeError("param_names must be a collection of names")
        candidates = list(param_names)
        validate_param_names(candidates)
        names = tuple(dict.fromkeys(candidates))
    positions = {name: position for position, name in enumerate(names, 1)}
    prepared = PreparedQuery(
        replace_named_params(sql, positions, positional_sub), names
    )
    logger.debug("Prepared query with parameters: %s", names)
    return prepared
