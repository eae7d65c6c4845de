import pytest

from piecewise.model import Range
from piecewise.transform import Map, MapChain


@pytest.fixture()
def make_chain():
    def mk(*stages):
        return MapChain(Map.from_triples(triples) for triples in stages)

    return mk


@pytest.fixture()
def test_round_trip(points):
    def t_round_trip(chain, *values):
        for value in values:
            output = chain.evaluate(value)
            fragments = chain.invert(Range(output, 1))
            assert value in points(fragments)
            for fragment in fragments:
                assert chain.evaluate(fragment.start) == output

    return t_round_trip
