import pytest

from hexstore.rombus import RombusMap


def _length(coord):
    x, y = coord
    return (abs(x) + abs(y) + abs(x + y)) // 2


def _rombus_coords(origin, rows, columns):
    ox, oy = origin
    return [(ox + x, oy + y) for y in range(rows) for x in range(columns)]


ORIGINS = [(0, 0), (1, -1), (-2, 3), (5, 0), (-1, -1)]


def test_example_length():
    rombus_map = RombusMap((0, 0), 5, 10, _length)
    assert rombus_map[(1, 0)] == 1


@pytest.mark.parametrize("origin", ORIGINS)
def test_validity(origin):
    for rows in range(0, 9):
        for columns in range(0, 9):
            expected = {
                h: i for i, h in enumerate(_rombus_coords(origin, rows, columns))
            }
            rombus_map = RombusMap(origin, rows, columns, lambda h: expected[h])
            assert len(rombus_map) == rows * columns
            for key, value in expected.items():
                assert rombus_map[key] == value


def test_out_of_bounds():
    rombus_map = RombusMap((1, 2), 3, 4, _length)
    inside = set(_rombus_coords((1, 2), 3, 4))
    for y in range(-3, 10):
        for x in range(-3, 10):
            coord = (x, y)
            assert (coord in rombus_map) == (coord in inside)
            if coord not in inside:
                assert rombus_map.get(coord, "missing") == "missing"
                with pytest.raises(KeyError):
                    rombus_map[coord]


def test_iteration_order():
    rombus_map = RombusMap((0, 0), 2, 3, lambda h: h)
    assert list(rombus_map) == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]


def test_empty_when_rows_or_columns_zero():
    assert len(RombusMap((0, 0), 0, 5, _length)) == 0
    assert len(RombusMap((0, 0), 5, 0, _length)) == 0
    assert (0, 0) not in RombusMap((0, 0), 0, 0, _length)


def test_negative_dimensions_raise():
    with pytest.raises(ValueError):
        RombusMap((0, 0), -1, 2, _length)
    with pytest.raises(ValueError):
        RombusMap((0, 0), 2, -1, _length)


def test_properties():
    rombus_map = RombusMap((3, 4), 6, 7, _length)
    assert rombus_map.origin == (3, 4)
    assert rombus_map.rows == 6
    assert rombus_map.columns == 7


def test_setitem():
    rombus_map = RombusMap((0, 0), 2, 2, lambda h: 0)
    rombus_map[(1, 1)] = "x"
    assert rombus_map[(1, 1)] == "x"
    assert list(rombus_map) == [0, 0, 0, "x"]
    with pytest.raises(KeyError):
        rombus_map[(2, 0)] = 1


def test_copy_is_independent():
    rombus_map = RombusMap((0, 0), 1, 2, lambda h: 0)
    clone = rombus_map.copy()
    clone[(0, 0)] = 3
    assert rombus_map[(0, 0)] == 0
    assert list(clone) == [3, 0]


def test_repr():
    rombus_map = RombusMap((0, 0), 1, 2, lambda h: 1)
    assert repr(rombus_map) == "RombusMap(inner=[1, 1], origin=(0, 0), rows=1, columns=2)"