"""Tests for the deprecation marker."""

from __future__ import annotations

import pytest

from bbb_api.core.deprecation import deprecated, is_deprecated


@deprecated("use new_call()", removal_version="1.0")
def old_call(value: int) -> int:
    return value * 2


def current_call() -> None:
    return None


class TestDeprecated:
    def test_warns_and_delegates(self) -> None:
        with pytest.warns(DeprecationWarning, match=r"old_call\(\) is deprecated: use new_call\(\)") as record:
            assert old_call(21) == 42
        assert "Will be removed in version 1.0" in str(record[0].message)

    def test_marker(self) -> None:
        assert is_deprecated(old_call) is True
        assert is_deprecated(current_call) is False
        assert old_call.__name__ == "old_call"
