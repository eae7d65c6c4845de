import pytest

from piecewise.model import Range
from piecewise.transform import Map, PreconditionError, RangeMap


class TestRangeMap:
    entry = RangeMap.create(10, 50, 5)

    def test_create(self):
        assert self.entry.source == Range(10, 5)
        assert self.entry.destination == Range(50, 5)

    def test_rejects_mismatched_lengths(self):
        with pytest.raises(ValueError):
            RangeMap(Range(0, 2), Range(5, 3))

    @pytest.mark.parametrize("value,expected", [(10, 50), (12, 52), (14, 54)])
    def test_forward(self, value, expected):
        assert self.entry.forward(value) == expected

    @pytest.mark.parametrize("value", [9, 15, 50])
    def test_forward_outside_source(self, value):
        with pytest.raises(PreconditionError):
            self.entry.forward(value)

    def test_precondition_error_is_not_a_value_error(self):
        with pytest.raises(AssertionError):
            self.entry.forward(0)
        assert not issubclass(PreconditionError, ValueError)

    @pytest.mark.parametrize(
        "subrange,expected",
        [
            (Range(50, 5), Range(10, 5)),
            (Range(51, 2), Range(11, 2)),
            (Range(54, 1), Range(14, 1)),
        ],
    )
    def test_backward(self, subrange, expected):
        assert self.entry.backward(subrange) == expected

    @pytest.mark.parametrize("subrange", [Range(49, 2), Range(54, 2), Range(10, 5)])
    def test_backward_outside_destination(self, subrange):
        with pytest.raises(PreconditionError):
            self.entry.backward(subrange)

    def test_backward_inverts_forward(self):
        for value in range(10, 15):
            assert self.entry.backward(Range(self.entry.forward(value), 1)) == Range(
                value, 1
            )

    def test_str(self):
        assert str(self.entry) == "[10, 15) -> [50, 55)"


class TestForward:
    map = Map.from_triples([(98, 50, 2), (50, 52, 48)])

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, 0),
            (49, 49),
            (50, 52),
            (79, 81),
            (97, 99),
            (98, 50),
            (99, 51),
            (100, 100),
        ],
    )
    def test_forward(self, value, expected):
        assert self.map.forward(value) == expected

    def test_entries_sorted_by_source(self):
        assert [entry.source.start for entry in self.map.entries] == [50, 98]

    def test_empty_entries_are_dropped(self):
        map = Map.from_triples([(5, 20, 3), (5, 40, 0), (9, 50, 0)])
        assert len(map) == 1
        assert map.forward(6) == 21
        assert map.forward(9) == 9
        assert map.backward(Range(40, 1)) == [Range(40, 1)]

    def test_empty_map_is_identity(self):
        assert Map.empty.forward(42) == 42
        assert Map.empty.backward(Range(3, 4)) == [Range(3, 4)]


class TestBackward:
    single = Map.from_triples([(0, 3, 1)])
    multi = Map.from_triples([(5, 15, 2), (0, 12, 1)])

    def test_covered(self):
        assert self.single.backward(Range(3, 1)) == [Range(0, 1)]

    def test_no_overlap_is_identity(self):
        assert self.single.backward(Range(0, 2)) == [Range(0, 2)]

    def test_range_after_every_destination(self):
        assert self.single.backward(Range(4, 10)) == [Range(4, 10)]

    def test_partial_overlap_splits(self):
        assert self.single.backward(Range(2, 2)) == [Range(2, 1), Range(0, 1)]

    def test_overlap_on_the_left(self):
        assert self.single.backward(Range(3, 3)) == [Range(0, 1), Range(4, 2)]

    def test_straddles_several_entries(self, total_length):
        fragments = self.multi.backward(Range(10, 10))
        assert fragments == [
            Range(10, 2),
            Range(0, 1),
            Range(13, 2),
            Range(5, 2),
            Range(17, 3),
        ]
        assert total_length(fragments) == 10

    def test_inside_one_destination(self):
        assert self.multi.backward(Range(16, 1)) == [Range(6, 1)]

    def test_empty_range(self):
        assert self.multi.backward(Range(12, 0)) == []

    def test_destinations_sorted(self):
        assert self.multi.destinations() == [Range(12, 1), Range(15, 2)]


def test_bound():
    assert Map.from_triples([(5, 15, 2), (30, 12, 1)]).bound == 31
    assert Map.empty.bound == 0


def test_len_and_str():
    map = Map.from_triples([(5, 15, 2), (0, 12, 1)])
    assert len(map) == 2
    assert str(map) == "{[0, 1) -> [12, 13), [5, 7) -> [15, 17)}"


class TestImage:
    map = Map.from_triples([(5, 15, 2), (0, 12, 1)])

    def test_entry_image(self):
        assert RangeMap.create(10, 50, 5).image(Range(11, 2)) == Range(51, 2)
        with pytest.raises(PreconditionError):
            RangeMap.create(10, 50, 5).image(Range(14, 2))

    def test_splits_at_sources(self, total_length):
        fragments = self.map.image(Range(0, 10))
        assert fragments == [Range(12, 1), Range(1, 4), Range(15, 2), Range(7, 3)]
        assert total_length(fragments) == 10

    def test_outside_every_source(self):
        assert self.map.image(Range(20, 5)) == [Range(20, 5)]

    def test_empty_range(self):
        assert self.map.image(Range(3, 0)) == []

    def test_agrees_with_forward(self, points):
        images = self.map.image(Range(0, 10))
        expected = sorted(self.map.forward(value) for value in range(10))
        assert sorted(points(images)) == expected
