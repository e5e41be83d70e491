from typing import Optional


class NamedSQLError(Exception):
    ...


class InvalidParameterName(NamedSQLError, ValueError):
    def __init__(self, name: Optional[object] = None) -> None:
        self.name = name
        super().__init__(
            "Only alphanumeric characters and the underscore are allowed "
            "in parameter names"
        )


class MissingParameter(NamedSQLError, KeyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Missing value for parameter: {self.name}"
