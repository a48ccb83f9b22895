import dataclasses

import pytest

from pycombinator import Err, Ok, ResultKind


class TestOk:
    def test_carries_value_and_rest(self) -> None:
        """Ok exposes the value, the rest and its variant."""
        res = Ok(42, "rest")

        assert res.kind is ResultKind.OK
        assert res.is_ok()
        assert not res.is_err()
        assert res.val == 42
        assert res.rest == "rest"
        assert res.unwrap() == 42

    def test_map_keeps_rest(self) -> None:
        """Mapping rewrites the value and keeps the remaining input."""
        assert Ok("a", "bc").map(str.upper) == Ok("A", "bc")

    def test_validate(self) -> None:
        """A failed check turns Ok into Err with the given message."""
        assert Ok(3, "").validate("too small", lambda n: n > 1) == Ok(3, "")
        assert Ok(0, "").validate("too small", lambda n: n > 1) == Err("too small")

    def test_is_immutable(self) -> None:
        """Results cannot be changed after construction."""
        res = Ok(1, "")
        with pytest.raises(dataclasses.FrozenInstanceError):
            res.val = 2  # type: ignore[misc]


class TestErr:
    def test_carries_only_a_message(self) -> None:
        """Err exposes only its message and variant."""
        res = Err("boom")

        assert res.kind is ResultKind.ERR
        assert res.is_err()
        assert not res.is_ok()
        assert res.msg == "boom"

    def test_has_no_value_or_rest(self) -> None:
        """Reading success-only fields off a failure is a programming error."""
        res = Err("boom")
        with pytest.raises(AttributeError):
            res.val  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            res.rest  # type: ignore[attr-defined]

    def test_unwrap_raises(self) -> None:
        """Unwrapping a failure is a programming error."""
        with pytest.raises(ValueError, match="boom"):
            Err("boom").unwrap()

    def test_map_and_validate_pass_through(self) -> None:
        """Err ignores map and validate."""
        err = Err("boom")
        assert err.map(str.upper) is err
        assert err.validate("other", lambda _: False) is err


def test_structural_equality() -> None:
    """Results compare by content."""
    assert Ok("a", "b") == Ok("a", "b")
    assert Ok("a", "b") != Ok("a", "")
    assert Err("x") == Err("x")
    assert Ok("x", "") != Err("x")
