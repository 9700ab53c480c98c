"""Pytest fixtures shared across the chart tests."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from pynumchart.chart import new_chart  # noqa: E402


@pytest.fixture
def chart():
    """Return an empty default chart."""

    return new_chart()


@pytest.fixture(autouse=True)
def close_figures():
    """Close any figure a test leaves open."""

    yield
    plt.close("all")
