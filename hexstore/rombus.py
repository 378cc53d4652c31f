"""Dense storage for rombus shaped maps of axial hex coordinates."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

Coord = tuple[int, int]


def _as_coord(coord: Sequence[int]) -> Coord:
    x, y = coord
    return int(x), int(y)


class RombusMap(Generic[T]):
    """Flat list storage for a dense rombus of axial ``(x, y)`` coordinates.

    The rombus spans ``columns`` values of ``x`` and ``rows`` values of ``y``
    starting at ``origin``. The set of coordinates is fixed at creation.
    """

    __slots__ = ("_origin", "_rows", "_columns", "_values")

    def __init__(
        self,
        origin: Sequence[int],
        rows: int,
        columns: int,
        values: Callable[[Coord], T],
    ) -> None:
        if rows < 0 or columns < 0:
            raise ValueError(
                f"rows and columns must be non-negative, got {rows} and {columns}"
            )
        ox, oy = _as_coord(origin)
        self._origin: Coord = (ox, oy)
        self._rows = rows
        self._columns = columns
        self._values: list[T] = [
            values((ox + x, oy + y)) for y in range(rows) for x in range(columns)
        ]

    @property
    def origin(self) -> Coord:
        """The smallest coordinate of the rombus."""
        return self._origin

    @property
    def rows(self) -> int:
        """Amount of ``y`` values per column."""
        return self._rows

    @property
    def columns(self) -> int:
        """Amount of ``x`` values per row."""
        return self._columns

    def _index(self, coord: Sequence[int]) -> int | None:
        x, y = _as_coord(coord)
        dx = x - self._origin[0]
        dy = y - self._origin[1]
        if not 0 <= dx < self._columns or not 0 <= dy < self._rows:
            return None
        return dy * self._columns + dx

    def get(self, coord: Sequence[int], default: T | None = None) -> T | None:
        """Return the value stored at ``coord``, or ``default`` when out of bounds."""
        index = self._index(coord)
        return default if index is None else self._values[index]

    def __getitem__(self, coord: Sequence[int]) -> T:
        index = self._index(coord)
        if index is None:
            raise KeyError(coord)
        return self._values[index]

    def __setitem__(self, coord: Sequence[int], value: T) -> None:
        index = self._index(coord)
        if index is None:
            raise KeyError(coord)
        self._values[index] = value

    def __contains__(self, coord: object) -> bool:
        try:
            return self._index(coord) is not None  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[T]:
        """Iterate over the stored values, in ``y`` order."""
        return iter(self._values)

    def __len__(self) -> int:
        """Number of stored values, ``rows * columns``."""
        return len(self._values)

    def copy(self) -> RombusMap[T]:
        """Return a shallow copy with independent storage."""
        clone = RombusMap.__new__(RombusMap)
        clone._origin = self._origin
        clone._rows = self._rows
        clone._columns = self._columns
        clone._values = list(self._values)
        return clone

    def __repr__(self) -> str:
        return (
            f"RombusMap(inner={self._values!r}, origin={self._origin!r}, "
            f"rows={self._rows!r}, columns={self._columns!r})"
        )