from __future__ import annotations

import pytest

from streamcompare.config import weight_from_env


def test_weight_from_env_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEFAULT_COVERAGE_WEIGHT", raising=False)

    assert weight_from_env("DEFAULT_COVERAGE_WEIGHT", 8) == 8


def test_weight_from_env_reads_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_COVERAGE_WEIGHT", "10")

    assert weight_from_env("DEFAULT_COVERAGE_WEIGHT", 8) == 10


@pytest.mark.parametrize("value", ["0", "11", "-2"])
def test_weight_from_env_rejects_out_of_range(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("DEFAULT_COVERAGE_WEIGHT", value)

    with pytest.raises(ValueError, match="DEFAULT_COVERAGE_WEIGHT"):
        weight_from_env("DEFAULT_COVERAGE_WEIGHT", 8)
