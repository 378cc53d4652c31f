"""Dense storage for hexagon shaped maps of axial hex coordinates."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

Coord = tuple[int, int]

_MISSING = object()


def _as_coord(coord: Sequence[int]) -> Coord:
    x, y = coord
    return int(x), int(y)


class HexagonalMap(Generic[T]):
    """Row based storage for a dense hexagon of axial ``(x, y)`` coordinates.

    Values are stored in one list per ``y`` row, so lookups are plain list
    indexing instead of hashing. The set of coordinates is fixed at creation.
    """

    __slots__ = ("_center", "_radius", "_rows")

    def __init__(
        self,
        center: Sequence[int],
        radius: int,
        values: Callable[[Coord], T],
    ) -> None:
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")
        cx, cy = _as_coord(center)
        self._center: Coord = (cx, cy)
        self._radius = radius
        self._rows: list[list[T]] = [
            [
                values((cx + x, cy + y))
                for x in range(max(-radius, -y - radius), min(radius, radius - y) + 1)
            ]
            for y in range(-radius, radius + 1)
        ]

    @property
    def center(self) -> Coord:
        """The center coordinate of the hexagon."""
        return self._center

    @property
    def radius(self) -> int:
        """The radius of the hexagon around its center."""
        return self._radius

    def _locate(self, coord: Sequence[int]) -> tuple[int, int] | None:
        x, y = _as_coord(coord)
        r = self._radius
        key_x = x - self._center[0] + r
        key_y = y - self._center[1] + r
        if key_x < 0 or not 0 <= key_y < len(self._rows):
            return None
        row_start = max(0, r - key_y)
        column = key_x - row_start
        if column < 0 or column >= len(self._rows[key_y]):
            return None
        return key_y, column

    def get(self, coord: Sequence[int], default: T | None = None) -> T | None:
        """Return the value stored at ``coord``, or ``default`` when out of bounds."""
        location = self._locate(coord)
        if location is None:
            return default
        row, column = location
        return self._rows[row][column]

    def __getitem__(self, coord: Sequence[int]) -> T:
        location = self._locate(coord)
        if location is None:
            raise KeyError(coord)
        row, column = location
        return self._rows[row][column]

    def __setitem__(self, coord: Sequence[int], value: T) -> None:
        location = self._locate(coord)
        if location is None:
            raise KeyError(coord)
        row, column = location
        self._rows[row][column] = value

    def __contains__(self, coord: object) -> bool:
        try:
            return self._locate(coord) is not None  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[list[T]]:
        """Iterate over the stored rows, in ``y`` order."""
        return iter(self._rows)

    def __len__(self) -> int:
        """Number of stored values."""
        return sum(len(row) for row in self._rows)

    def copy(self) -> HexagonalMap[T]:
        """Return a shallow copy with independent row storage."""
        clone = HexagonalMap.__new__(HexagonalMap)
        clone._center = self._center
        clone._radius = self._radius
        clone._rows = [list(row) for row in self._rows]
        return clone

    def __repr__(self) -> str:
        return (
            f"HexagonalMap(center={self._center!r}, radius={self._radius!r}, "
            f"inner={self._rows!r})"
        )