import pytest

from chromazone.geometry import LinearScale, SurfaceRect
from chromazone.gradients import StopListSurface


@pytest.fixture
def rect():
    return SurfaceRect(top=0, bottom=100, left=0, right=300)


@pytest.fixture
def surface():
    return StopListSurface()


@pytest.fixture
def inverted():
    """value 0 -> pixel 100, value 100 -> pixel 0."""
    return lambda v: 100 - v


@pytest.fixture
def centered_scale(rect):
    """Domain [-50, 50] over the rect: value 0 sits at mid-height."""
    return LinearScale.vertical((-50, 50), rect)
