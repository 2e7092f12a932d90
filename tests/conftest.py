"""Shared test fixtures for spacing and diagram tests."""
import pytest
from shared.types import AngleMode
from beams.engine import compute_spacing
from beams.layout import layout_diagram


@pytest.fixture(scope="session")
def scenario_a():
    """C=108, D=36, B=30 full, s=1: beams just touch."""
    return compute_spacing(108, 36, 30, AngleMode.FULL, 1.0)


@pytest.fixture(scope="session")
def scenario_b():
    """Same as A with s=0.9: 10% overlap."""
    return compute_spacing(108, 36, 30, AngleMode.FULL, 0.9)


@pytest.fixture(scope="session")
def scenario_c():
    """Half-angle 15 degrees, equivalent to full 30."""
    return compute_spacing(108, 36, 15, AngleMode.HALF, 1.0)


@pytest.fixture(scope="session")
def degenerate():
    """Work plane above the ceiling."""
    return compute_spacing(36, 108, 30, AngleMode.FULL, 0.9)


@pytest.fixture(scope="session")
def layout_a(scenario_a):
    return layout_diagram(scenario_a)


@pytest.fixture(scope="session")
def layout_b(scenario_b):
    return layout_diagram(scenario_b)
