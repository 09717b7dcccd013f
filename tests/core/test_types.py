"""Tests for Square and coordinate translation."""

import pytest

from schack.core.types import (
    Square,
    all_squares,
    parse_square_label,
    square_at,
    square_label,
)


class TestSquare:
    @pytest.mark.parametrize("col,row", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_out_of_range_rejected(self, col: int, row: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Square(col, row)

    def test_hashable_and_equal(self) -> None:
        assert {Square(1, 2), Square(1, 2)} == {Square(1, 2)}

    def test_str_is_label(self) -> None:
        assert str(Square(4, 6)) == "e2"


class TestSquareLabel:
    def test_corners(self) -> None:
        assert square_label(Square(0, 0)) == "a8"
        assert square_label(Square(7, 7)) == "h1"

    def test_e7(self) -> None:
        assert square_label(Square(4, 1)) == "e7"

    def test_every_square(self) -> None:
        for sq in all_squares():
            label = square_label(sq)
            assert label[0] == chr(ord("a") + sq.column)
            assert label[1] == str(8 - sq.row)

    def test_labels_are_unique(self) -> None:
        labels = {square_label(sq) for sq in all_squares()}
        assert len(labels) == 64

    def test_parse_inverts_label(self) -> None:
        for sq in all_squares():
            assert parse_square_label(square_label(sq)) == sq

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E2", "e22"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square_label(name)


class TestSquareAt:
    def test_top_left(self) -> None:
        assert square_at(0.0, 0.0, 90) == Square(0, 0)

    def test_floor_division(self) -> None:
        assert square_at(89.9, 179.99, 90) == Square(0, 1)
        assert square_at(90.0, 180.0, 90) == Square(1, 2)

    def test_bottom_right(self) -> None:
        assert square_at(719.5, 719.5, 90) == Square(7, 7)

    @pytest.mark.parametrize(
        "x,y", [(720.0, 10.0), (10.0, 720.0), (950.0, 200.0), (-0.5, 10.0)]
    )
    def test_outside_grid(self, x: float, y: float) -> None:
        assert square_at(x, y, 90) is None
