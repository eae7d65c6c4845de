import pydash
import pytest


@pytest.fixture
def points():
    def points(fragments):
        return pydash.flat_map(
            fragments, lambda fragment: list(range(fragment.start, fragment.end))
        )

    return points


@pytest.fixture
def total_length():
    def total_length(fragments):
        return pydash.sum_(pydash.map_(fragments, "length"))

    return total_length
