"""Shared path fixtures. Function scoped: most operations mutate their input."""
import pytest
from pathkit.types import Line, Circle, Arc, Bezier


@pytest.fixture
def line():
    return Line((0.0, 0.0), (10.0, 0.0), layer="cut")


@pytest.fixture
def circle():
    return Circle((1.0, 2.0), 3.0)


@pytest.fixture
def arc():
    return Arc((0.0, 0.0), 5.0, 0.0, 90.0, layer="etch")


@pytest.fixture
def wrap_arc():
    """Arc sweeping 20 degrees through 0."""
    return Arc((0.0, 0.0), 5.0, 350.0, 10.0)


@pytest.fixture
def quad():
    return Bezier((0.0, 0.0), (4.0, 0.0), [(2.0, 2.0)], layer="ink")


@pytest.fixture
def cubic():
    return Bezier((0.0, 0.0), (3.0, 0.0), [(1.0, 2.0), (2.0, -2.0)])


@pytest.fixture
def all_paths(line, circle, arc, quad, cubic):
    return [line, circle, arc, quad, cubic]
