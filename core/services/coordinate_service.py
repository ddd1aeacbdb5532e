from __future__ import annotations

from typing import Union

Coordinate = Union[str, int, float]


class CoordinateService:
    """
    Normalizes latitude/longitude values before they are bound as GraphQL
    String variables.

    Rules:
    - strings are passed through unchanged
    - integral floats drop the fractional part: 18.0 -> "18"
    - any other number uses its default representation: 18.5 -> "18.5"
    """

    @staticmethod
    def to_graphql_string(value: Coordinate) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def is_present(value: object) -> bool:
        """
        A coordinate counts as given only when it is truthy ("" and 0 do not).
        """
        return bool(value)
