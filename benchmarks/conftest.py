"""Shared fixtures for benchmarks: reference dates covering all grid shapes."""

from datetime import date

import pytest


def make_reference_dates(n_months: int) -> list[date]:
    """Return the first day of *n_months* consecutive months from 2000-01."""
    return [date(2000 + i // 12, i % 12 + 1, 1) for i in range(n_months)]


@pytest.fixture(params=[12, 120], ids=["1year", "10years"])
def reference_dates(request):
    """Parametrized list of month references."""
    return make_reference_dates(request.param)
