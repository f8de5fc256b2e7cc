"""Value wrapper returned for a single entry property."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union


class Property:
    """One or more scalar values recorded under a single property name."""

    def __init__(self, values: Union[Any, Sequence[Any]]) -> None:
        if isinstance(values, (list, tuple)):
            normalised = list(values)
        else:
            normalised = [values]
        if not normalised:
            raise ValueError("Property requires at least one value")
        self._values: List[Any] = normalised

    def values(self) -> List[Any]:
        return list(self._values)

    def first_value(self) -> Any:
        return self._values[0]

    def value_at(self, index: int) -> Optional[Any]:
        """Return the value at ``index`` or ``None`` when out of range."""

        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def count(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Property({self._values!r})"
