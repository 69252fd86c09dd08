import pytest

from text_coords import CoordinateError, Position


def test_ordering_by_row_then_column() -> None:
    assert Position(0, 5) < Position(1, 0)
    assert Position(3, 1) < Position(3, 2)
    assert not Position(3, 2) < Position(3, 2)
    assert Position(2, 99) < Position(3, 0)


def test_sorting_positions() -> None:
    positions = [Position(1, 0), Position(0, 7), Position(1, 3), Position(0, 0)]

    assert sorted(positions) == [
        Position(0, 0),
        Position(0, 7),
        Position(1, 0),
        Position(1, 3),
    ]


def test_origin() -> None:
    assert Position.origin() == Position(0, 0)
    assert Position.origin().is_origin()
    assert Position() == Position.origin()
    assert not Position(0, 1).is_origin()
    assert not Position(1, 0).is_origin()


def test_from_pair() -> None:
    assert Position.from_pair((4, 2)) == Position(4, 2)
    assert Position.from_pair([1, 9]) == Position(1, 9)


def test_negative_fields_rejected() -> None:
    with pytest.raises(CoordinateError):
        Position(-1, 0)
    with pytest.raises(CoordinateError):
        Position(0, -3)


def test_positions_are_hashable_values() -> None:
    assert {Position(1, 1), Position(1, 1)} == {Position(1, 1)}


def test_to_point() -> None:
    assert Position(7, 3).to_point() == (7, 3)


def test_traverse_plain_text() -> None:
    assert Position(2, 3).traverse("xy") == Position(2, 5)
    assert Position.origin().traverse("") == Position.origin()


def test_traverse_line_endings() -> None:
    assert Position.origin().traverse("x\n") == Position(1, 0)
    assert Position.origin().traverse("ab\r\ncd") == Position(1, 2)
    assert Position.origin().traverse("a\rb") == Position(1, 1)
    assert Position.origin().traverse("tail\r") == Position(1, 0)
    assert Position.origin().traverse("\r\r\n") == Position(2, 0)
    assert Position(5, 4).traverse("a\u2028b") == Position(6, 1)


def test_traverse_counts_characters_not_display_cells() -> None:
    # Two wide characters and a combining mark: three raw characters.
    assert Position(0, 1).traverse("\u4eca\u65e5\u0301") == Position(0, 4)


@pytest.mark.parametrize("row, col", [(0.5, 1), (1, 2.0), ("1", 0), (True, 0)])
def test_non_integer_fields_rejected(row: object, col: object) -> None:
    with pytest.raises(CoordinateError):
        Position(row, col)  # type: ignore[arg-type]


@pytest.mark.parametrize("pair", [(1, 2, 3), (4,), (), 7, None])
def test_from_pair_rejects_malformed_input(pair: object) -> None:
    with pytest.raises(CoordinateError) as excinfo:
        Position.from_pair(pair)  # type: ignore[arg-type]
    assert excinfo.value.position == pair
