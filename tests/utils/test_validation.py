"""Testes para netmera.utils.validation."""

from __future__ import annotations

import math

import pytest

from netmera.utils.errors import ConfigurationError
from netmera.utils.validation import must_between, not_empty, not_null


class TestNotNull:
    def test_returns_value(self) -> None:
        assert not_null(0, "Valor") == 0

    def test_rejects_none(self) -> None:
        with pytest.raises(ConfigurationError, match="Valor não pode ser nulo"):
            not_null(None, "Valor")


class TestNotEmpty:
    @pytest.mark.parametrize("value", ["", "  ", [], {}])
    def test_rejects_empty(self, value: object) -> None:
        with pytest.raises(ConfigurationError, match="não pode ser vazio"):
            not_empty(value, "Campo")

    def test_returns_value(self) -> None:
        assert not_empty("abc", "Campo") == "abc"


class TestMustBetween:
    def test_bounds_are_inclusive(self) -> None:
        assert must_between(0, 50, 0, "N") == 0
        assert must_between(0, 50, 50, "N") == 50

    def test_infinite_upper_bound(self) -> None:
        assert must_between(0, math.inf, 1e9, "Timeout") == 1e9

    @pytest.mark.parametrize("value", [-1, 51])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(ConfigurationError, match="N deve estar entre 0 e 50"):
            must_between(0, 50, value, "N")

    @pytest.mark.parametrize("value", [True, "3", None])
    def test_rejects_non_numeric(self, value: object) -> None:
        with pytest.raises(ConfigurationError, match="numérico"):
            must_between(0, 50, value, "N")  # type: ignore[arg-type]
