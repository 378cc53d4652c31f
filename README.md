# hexstore

Compact, list-backed storage for dense hex-grid maps addressed by axial
`(x, y)` coordinates.

A plain `dict` keyed by coordinates works for any map shape. When the map is
dense and its shape never changes, a layout computed from the coordinates
themselves is smaller and faster. `hexstore` provides two such containers:

* `hexstore.hexagonal.HexagonalMap`: a hexagon of a given radius around a
  center coordinate, stored row by row.
* `hexstore.rombus.RombusMap`: a rombus (parallelogram) of `rows` by
  `columns` starting at an origin coordinate, stored in one flat list.

Use them only when all of these hold:

* the map has exactly that shape,
* every coordinate in the shape has a value,
* no coordinate is ever added or removed.

Otherwise, use a `dict`.

## Installation

```
pip install hexstore
```

## Coordinates

Coordinates are plain pairs of integers, `(x, y)`. Any two-item sequence of
integers is accepted as a key; the containers hand coordinates to your value
function as tuples.

## Hexagonal maps

The map is built by calling a function once for every coordinate inside the
hexagon; its return value becomes the stored value.

```python
from hexstore.hexagonal import HexagonalMap

def distance_from_origin(coord):
    x, y = coord
    return max(abs(x), abs(y), abs(-x - y))

grid = HexagonalMap((0, 0), 10, distance_from_origin)

grid[(1, 0)]          # 1
(11, 0) in grid       # False: outside the radius
grid.get((11, 0), -1) # -1
grid[(2, -1)] = 42    # values can be replaced in place
grid.center           # (0, 0)
grid.radius           # 10
```

A negative radius raises `ValueError`. Reading or writing a coordinate
outside the hexagon with `[]` raises `KeyError`; `get` returns the default
(`None` unless given) instead. `in` returns `False` for anything that is not
a coordinate inside the hexagon.

Iterating a `HexagonalMap` yields its rows in `y` order, each row being the
list of values for that `y`. `len` gives the number of stored values, and
`copy` returns a map with the same bounds and its own row lists (the values
themselves are shared, not copied).

## Rombus maps

```python
from hexstore.rombus import RombusMap

grid = RombusMap((0, 0), 5, 10, lambda coord: sum(coord))

len(grid)             # 50, that is rows * columns
grid[(3, 2)]          # 5
(10, 0) in grid       # False: only 10 columns, x runs from 0 to 9
grid.origin, grid.rows, grid.columns   # ((0, 0), 5, 10)
```

Values are laid out row after row: for each `y` from the origin's `y`
upwards, every `x` of that row in turn. Iterating a `RombusMap` yields the
values in exactly that order. A map with zero rows or zero columns is empty;
negative counts raise `ValueError`. Indexing, `get`, `in` and `copy` behave
as for `HexagonalMap`.

## What is not included

`hexstore` only stores values. It has no hex coordinate type and no
coordinate arithmetic: no distances, neighbours, lines, rings or shape
iterators. Compute those yourself and use the containers to hold the results.

## Running the tests

```
pip install -e ".[test]"
pytest
```