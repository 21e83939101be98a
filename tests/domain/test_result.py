"""Tests for the Ok / Err result primitives."""

import pytest

from agegate.domain.result import Err, Ok, UnwrapError


class TestOk:
    def test_predicates(self) -> None:
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_map_transforms_value(self) -> None:
        assert Ok(21).map(lambda n: n * 2) == Ok(42)

    def test_map_err_is_identity(self) -> None:
        ok = Ok(3)
        assert ok.map_err(lambda e: "never") is ok

    def test_and_then_chains(self) -> None:
        assert Ok(10).and_then(lambda n: Ok(n * 2)) == Ok(20)
        assert Ok(-1).and_then(lambda n: Err("negative")) == Err("negative")

    def test_unwrap_variants(self) -> None:
        ok = Ok(42)
        assert ok.unwrap() == 42
        assert ok.expect("should be a number") == 42
        assert ok.unwrap_or(0) == 42
        assert ok.unwrap_or_else(lambda e: -1) == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(UnwrapError, match="unwrap_err"):
            Ok(1).unwrap_err()

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            Ok(1).value = 2  # type: ignore[misc]


class TestErr:
    def test_predicates(self) -> None:
        assert Err("x").is_ok() is False
        assert Err("x").is_err() is True

    def test_map_skips_function(self) -> None:
        calls: list[int] = []
        err = Err("bad")
        assert err.map(calls.append) is err
        assert calls == []

    def test_map_err_transforms_error(self) -> None:
        assert Err("bad").map_err(str.upper) == Err("BAD")

    def test_and_then_never_calls(self) -> None:
        calls: list[int] = []

        def step(n: int) -> Ok[int]:
            calls.append(n)
            return Ok(n)

        assert Err("bad").and_then(step) == Err("bad")
        assert calls == []

    def test_unwrap_raises_with_error(self) -> None:
        with pytest.raises(UnwrapError) as exc_info:
            Err("boom").unwrap()
        assert exc_info.value.error == "boom"

    def test_expect_uses_message(self) -> None:
        with pytest.raises(UnwrapError, match="should be a number: boom"):
            Err("boom").expect("should be a number")

    def test_fallbacks(self) -> None:
        assert Err("bad").unwrap_or(0) == 0
        assert Err("bad").unwrap_or_else(len) == 3
        assert Err("bad").unwrap_err() == "bad"

    def test_ok_and_err_never_equal(self) -> None:
        assert Ok(1) != Err(1)
