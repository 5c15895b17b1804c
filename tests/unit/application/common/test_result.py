"""Tests for the Result type."""

import pytest

from bizhub.application.common.result import Result


class TestResult:
    def test_success_carries_data_and_message(self) -> None:
        result = Result.success(42, message="Done")

        assert result.succeeded
        assert not result.failed
        assert result.data == 42
        assert result.messages == ["Done"]

    def test_fail_accepts_single_message(self) -> None:
        result = Result.fail("Advertisement not found.")

        assert result.failed
        assert result.messages == ["Advertisement not found."]
        assert result.data is None

    def test_fail_accepts_several_messages(self) -> None:
        result = Result.fail(["first", "second"])

        assert result.messages == ["first", "second"]

    def test_unwrap_raises_on_failure(self) -> None:
        with pytest.raises(ValueError, match="boom"):
            Result.fail("boom").unwrap()

    def test_value_or_returns_default_for_failure_and_empty_success(self) -> None:
        assert Result.fail("nope").value_or(7) == 7
        assert Result.success(None).value_or(7) == 7
        assert Result.success(3).value_or(7) == 3

    def test_map_transforms_payload_and_keeps_messages(self) -> None:
        result = Result.success(2, message="ok").map(lambda value: value * 10)

        assert result.data == 20
        assert result.messages == ["ok"]

    def test_map_skips_failed_result(self) -> None:
        calls: list[int] = []
        result = Result.fail("bad").map(calls.append)

        assert result.failed
        assert result.messages == ["bad"]
        assert calls == []

    def test_flat_map_chains_results(self) -> None:
        result = Result.success(5).flat_map(
            lambda value: Result.fail("too big") if value > 3 else Result.success(value)
        )

        assert result.failed
        assert result.messages == ["too big"]

    def test_cast_drops_payload_but_keeps_outcome(self) -> None:
        casted = Result.fail("store error").cast()

        assert casted.failed
        assert casted.messages == ["store error"]
