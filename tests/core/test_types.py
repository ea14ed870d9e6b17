"""Tests for Coordinate and square helpers."""

from dataclasses import FrozenInstanceError

import pytest

from chessrules.core.types import A1, E4, H8, Coordinate, parse_square, ray, square_name


class TestCoordinate:
    def test_equality_by_value(self) -> None:
        assert Coordinate(3, 4) == Coordinate(3, 4)
        assert Coordinate(3, 4) != Coordinate(4, 3)

    def test_hashable(self) -> None:
        squares = {Coordinate(1, 1), Coordinate(1, 1), Coordinate(2, 1)}
        assert len(squares) == 2

    def test_immutable(self) -> None:
        sq = Coordinate(1, 1)
        with pytest.raises(FrozenInstanceError):
            sq.x = 2  # type: ignore[misc]

    def test_shifted_returns_new_value(self) -> None:
        sq = Coordinate(4, 4)
        moved = sq.shifted(1, -2)
        assert moved == Coordinate(5, 2)
        assert sq == Coordinate(4, 4)

    def test_named_constants(self) -> None:
        assert A1 == Coordinate(1, 1)
        assert E4 == Coordinate(5, 4)
        assert H8 == Coordinate(8, 8)

    def test_str_is_square_name(self) -> None:
        assert str(E4) == "e4"

    def test_str_off_board(self) -> None:
        assert str(Coordinate(0, -1)) == "(0, -1)"


class TestSquareNames:
    @pytest.mark.parametrize("name, expected", [("a1", A1), ("e4", E4), ("H8", H8)])
    def test_parse(self, name: str, expected: Coordinate) -> None:
        assert parse_square(name) == expected

    def test_name(self) -> None:
        assert square_name(Coordinate(7, 1)) == "g1"

    @pytest.mark.parametrize("name", ["", "e", "4e", "e0", "?3"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_no_name_off_board(self) -> None:
        with pytest.raises(ValueError):
            square_name(Coordinate(0, 3))


class TestRay:
    def test_stops_at_edge(self) -> None:
        assert list(ray(Coordinate(6, 6), 1, 1)) == [Coordinate(7, 7), H8]

    def test_excludes_origin(self) -> None:
        assert Coordinate(4, 4) not in set(ray(Coordinate(4, 4), 0, 1))

    def test_empty_from_edge(self) -> None:
        assert list(ray(H8, 1, 0)) == []

    def test_restartable(self) -> None:
        first = list(ray(A1, 0, 1))
        second = list(ray(A1, 0, 1))
        assert first == second
        assert len(first) == 7

    def test_custom_bounds(self) -> None:
        assert list(ray(A1, 1, 0, width=3, height=3)) == [Coordinate(2, 1), Coordinate(3, 1)]
