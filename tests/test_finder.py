"""Tests for the pure linear-search helpers (core/finder.py)."""

from __future__ import annotations

import pytest

from seqfind.core.finder import contains, find, find_all
from seqfind.core.models import NOT_FOUND, LookupResult

NUMBERS = [1, 3, 2, 5, 4]


class TestFind:
    def test_key_present(self) -> None:
        assert find(NUMBERS, 3) == LookupResult(position=1)

    def test_key_absent(self) -> None:
        assert find(NUMBERS, 9) == NOT_FOUND

    @pytest.mark.parametrize("key", [-1, 0, 1, 42])
    def test_empty_sequence_never_matches(self, key: int) -> None:
        assert find([], key) == NOT_FOUND

    def test_first_element(self) -> None:
        assert find(NUMBERS, 1).unwrap() == 0

    def test_last_element(self) -> None:
        assert find(NUMBERS, 4).unwrap() == 4

    def test_returns_smallest_index_on_duplicates(self) -> None:
        assert find([7, 2, 7, 2], 2).unwrap() == 1

    def test_position_points_at_key(self) -> None:
        for key in NUMBERS:
            result = find(NUMBERS, key)
            assert NUMBERS[result.unwrap()] == key

    def test_accepts_tuple(self) -> None:
        assert find((5, 6), 6).unwrap() == 1

    def test_does_not_mutate_input(self) -> None:
        data = list(NUMBERS)
        find(data, 5)
        assert data == NUMBERS


class TestFindAll:
    def test_all_matches_ascending(self) -> None:
        assert find_all([7, 2, 7, 2, 7], 7) == (0, 2, 4)

    def test_no_match(self) -> None:
        assert find_all(NUMBERS, 9) == ()

    def test_empty(self) -> None:
        assert find_all([], 1) == ()

    def test_first_of_all_matches_find(self) -> None:
        data = [4, 1, 4]
        assert find_all(data, 4)[0] == find(data, 4).unwrap()


class TestContains:
    def test_present(self) -> None:
        assert contains(NUMBERS, 5)

    def test_absent(self) -> None:
        assert not contains(NUMBERS, 6)
