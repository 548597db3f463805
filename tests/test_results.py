"""Tests for Option and Result, and the helpers around them."""

import logging

import pytest

import pynub as nb


class TestOption:
    def test_from(self) -> None:  # noqa: D102
        assert nb.Option.from_(0) == nb.Some(0)
        assert nb.Option.from_(None) is nb.NONE

    def test_unwrap_none_raises(self) -> None:  # noqa: D102
        with pytest.raises(nb.OptionUnwrapError):
            nb.NONE.unwrap()
        with pytest.raises(nb.OptionUnwrapError, match="empty"):
            nb.IntSlice().first().expect("empty")

    def test_combinators(self) -> None:  # noqa: D102
        assert nb.Some(2).map(lambda x: x * 2).unwrap() == 4  # noqa: PLR2004
        assert nb.Some(2).and_then(lambda _: nb.NONE) is nb.NONE
        assert nb.NONE.or_else(lambda: nb.Some(1)) == nb.Some(1)
        assert nb.NONE.unwrap_or_else(lambda: 5) == 5  # noqa: PLR2004

    def test_pattern_matching(self) -> None:  # noqa: D102
        match nb.StrSlice(["a"]).first():
            case nb.Some(value):
                assert value == "a"
            case _:
                pytest.fail("expected Some")


class TestResult:
    def test_ok(self) -> None:  # noqa: D102
        result: nb.Result[int, str] = nb.Ok(1)
        assert result.is_ok()
        assert result.unwrap() == 1
        assert result.map(str) == nb.Ok("1")
        assert result.map_err(len) == nb.Ok(1)
        assert result.ok() == nb.Some(1)
        assert result.err() is nb.NONE
        with pytest.raises(nb.ResultUnwrapError):
            result.unwrap_err()

    def test_err(self) -> None:  # noqa: D102
        result: nb.Result[int, str] = nb.Err("boom")
        assert result.is_err()
        assert result.unwrap_or(0) == 0
        assert result.unwrap_or_else(len) == 4  # noqa: PLR2004
        assert result.map_err(str.upper) == nb.Err("BOOM")
        assert result.and_then(lambda x: nb.Ok(x + 1)) == nb.Err("boom")
        with pytest.raises(nb.ResultUnwrapError, match="ctx: boom"):
            result.expect("ctx")


def test_deref() -> None:
    """deref unwraps exactly one level."""
    assert nb.deref(nb.IntSlice([1])) == [1]
    assert nb.deref(nb.Some(nb.Str("a"))) == nb.Str("a")
    assert nb.deref(nb.StrMap({"a": 1})) == {"a": 1}
    assert nb.deref(3) == 3  # noqa: PLR2004


def test_pipeable() -> None:  # noqa: D103
    seen: list[int] = []
    result = nb.IntSlice([1, 2]).inspect(lambda s: seen.append(s.len())).into(sum)
    assert result == 3  # noqa: PLR2004
    assert seen == [2]


def test_config_repr_truncation() -> None:  # noqa: D103
    nb.set_config(max_repr_items=2)
    try:
        assert repr(nb.IntSlice([1, 2, 3])) == "IntSlice(1, 2, ...)"
        assert repr(nb.IntSlice([1, 2])) == "IntSlice(1, 2)"
    finally:
        nb.set_config(max_repr_items=20)


def test_set_config_rejects_unknown_fields() -> None:  # noqa: D103
    with pytest.raises(TypeError):
        nb.set_config(unknown=1)


def test_setup_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    """The level comes from the argument, then the environment."""
    monkeypatch.setenv("PYNUB_LOG_LEVEL", "debug")
    logger = nb.setup_logger("pynub.tests.env")
    assert logger.level == logging.DEBUG
    assert nb.setup_logger("pynub.tests.arg", level="error").level == logging.ERROR
    handlers = nb.setup_logger("pynub.tests.arg").handlers
    assert len(handlers) == 1
