"""Tests for the prefix scan helper."""

from __future__ import annotations

from simpletoc.take_while import take_while


class TestTakeWhile:
    """Tests for take_while function."""

    def test_takes_prefix_until_predicate_fails(self) -> None:
        """Stops at the first item failing the predicate."""
        users = [
            {"user": "john", "active": False},
            {"user": "mike", "active": False},
            {"user": "berto", "active": True},
            {"user": "ana", "active": False},
        ]

        result = take_while(lambda u: not u["active"], users)

        assert [u["user"] for u in result] == ["john", "mike"]

    def test_takes_everything_when_predicate_always_holds(self) -> None:
        """Returns the whole sequence when nothing fails."""
        assert take_while(lambda n: n > 0, [1, 2, 3]) == [1, 2, 3]

    def test_returns_empty_when_first_item_fails(self) -> None:
        """Returns an empty list when the first item fails."""
        assert take_while(lambda n: n > 0, [0, 1, 2]) == []

    def test_handles_empty_input(self) -> None:
        """Returns an empty list for empty input."""
        assert take_while(lambda n: True, []) == []

    def test_stops_calling_predicate_after_failure(self) -> None:
        """Items after the first failure are never inspected."""
        seen: list[int] = []

        def predicate(n: int) -> bool:
            seen.append(n)
            return n < 2

        take_while(predicate, [0, 1, 2, 3, 4])

        assert seen == [0, 1, 2]
