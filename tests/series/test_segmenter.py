"""Tests for the reference split"""

import random
from datetime import timedelta

import pytest

from refchart.data.models import Sample, Segment, Side
from refchart.series.segmenter import (
    classify_side,
    crosses_reference,
    interpolate_crossing,
    split_by_reference,
)

EPS = 1e-9


def random_series(make_series, seed, count=60, low=90.0, high=120.0):
    rng = random.Random(seed)
    return make_series([rng.uniform(low, high) for _ in range(count)])


class TestCrossesReference:
    """Test the side-change rule"""

    @pytest.mark.parametrize("prev, price, expected", [
        (100, 110, True),
        (110, 100, True),
        (110, 105, True),    # equal counts as lower side
        (105, 110, True),
        (105, 100, False),
        (100, 105, False),
        (105, 105, False),
        (106, 110, False),
    ])
    def test_rule(self, prev, price, expected):
        assert crosses_reference(prev, price, 105) is expected


class TestInterpolateCrossing:
    """Test crossing point interpolation"""

    def test_midpoint(self, at_day):
        a = Sample(ts=at_day(0), price=100)
        b = Sample(ts=at_day(1), price=110)
        crossing = interpolate_crossing(a, b, 105)

        assert crossing.ts == at_day(0.5)
        assert crossing.price == 105
        assert crossing.synthetic is True

    def test_numeric_x(self):
        crossing = interpolate_crossing(Sample(ts=0, price=120), Sample(ts=10, price=100), 115)
        assert crossing.ts == pytest.approx(2.5)
        assert crossing.price == 115


class TestClassifySide:
    """Test segment side classification"""

    def test_both_at_or_above(self, make_series):
        assert classify_side(make_series([105, 110]), 105) is Side.ABOVE

    def test_first_below(self, make_series):
        assert classify_side(make_series([100, 105, 120]), 105) is Side.BELOW

    def test_only_first_two_points_count(self, make_series):
        assert classify_side(make_series([110, 106, 90]), 105) is Side.ABOVE

    def test_single_point(self, make_series):
        assert classify_side(make_series([110]), 105) is Side.ABOVE
        assert classify_side(make_series([100]), 105) is Side.BELOW


class TestSplitByReference:
    """Test splitting a series into segments"""

    def test_empty_series(self):
        assert split_by_reference([], 105) == []

    def test_single_sample(self, make_series):
        segments = split_by_reference(make_series([100]), 105)
        assert len(segments) == 1
        assert len(segments[0]) == 1
        assert segments[0].side is Side.BELOW

    def test_no_crossing(self, make_series):
        samples = make_series([100, 105, 102])
        segments = split_by_reference(samples, 105)

        assert len(segments) == 1
        assert segments[0].points == tuple(samples)
        assert segments[0].side is Side.BELOW

    def test_single_crossing(self, make_series, at_day):
        samples = make_series([100, 110])
        segments = split_by_reference(samples, 105)

        assert len(segments) == 2
        below, above = segments
        assert below.side is Side.BELOW
        assert above.side is Side.ABOVE
        assert below.points == (Sample(at_day(0), 100), Sample(at_day(0.5), 105))
        assert above.points == (Sample(at_day(0.5), 105), Sample(at_day(1), 110))
        assert below.end.synthetic and above.start.synthetic

    def test_sample_series(self, sample_series, at_day):
        segments = split_by_reference(sample_series, 105)

        assert [s.side for s in segments] == [Side.BELOW, Side.ABOVE, Side.BELOW, Side.ABOVE]
        assert [len(s) for s in segments] == [4, 5, 3, 2]

        crossings = [s.end for s in segments[:-1]]
        assert [c.ts for c in crossings] == [
            at_day(2) + timedelta(hours=12),
            at_day(5) + timedelta(hours=8),
            at_day(6) + timedelta(hours=9),
        ]
        assert all(c.price == 105 for c in crossings)

    def test_falling_series(self, make_series):
        segments = split_by_reference(make_series([120, 110, 100, 90]), 105)
        assert [s.side for s in segments] == [Side.ABOVE, Side.BELOW]
        assert segments[0].end.price == 105

    def test_points_equal_to_reference_stay_below(self, make_series):
        samples = make_series([100, 105, 105, 100])
        segments = split_by_reference(samples, 105)

        assert len(segments) == 1
        assert segments[0].side is Side.BELOW

    def test_touch_from_above_then_below(self, make_series, at_day):
        segments = split_by_reference(make_series([110, 105, 100]), 105)

        assert len(segments) == 2
        # crossing lands exactly on the touching sample
        assert segments[0].end.ts == at_day(1)
        # a touching point right after a crossing classifies the run as above
        assert segments[1].side is Side.ABOVE

    def test_segments_are_immutable(self, make_series):
        segment = split_by_reference(make_series([100, 110]), 105)[0]
        assert isinstance(segment, Segment)
        assert isinstance(segment.points, tuple)
        with pytest.raises(AttributeError):
            segment.side = Side.ABOVE

    def test_numeric_x(self):
        samples = [Sample(ts=0, price=100), Sample(ts=10, price=110)]
        below, above = split_by_reference(samples, 105)
        assert below.end.ts == pytest.approx(5)
        assert above.start is below.end


class TestSplitProperties:
    """Properties that hold for any series"""

    @pytest.mark.parametrize("seed", range(10))
    def test_partition(self, make_series, seed):
        samples = random_series(make_series, seed)
        segments = split_by_reference(samples, 105)

        # adjacent segments share their boundary point
        for left, right in zip(segments, segments[1:]):
            assert left.end is right.start
            assert left.end.synthetic

        flattened = list(segments[0].points)
        for segment in segments[1:]:
            flattened.extend(segment.points[1:])

        originals = [p for p in flattened if not p.synthetic]
        assert originals == samples
        assert all(a is b for a, b in zip(originals, samples))

        # timestamps stay ordered with crossings inserted
        stamps = [p.ts for p in flattened]
        assert stamps == sorted(stamps)

    @pytest.mark.parametrize("seed", range(10))
    def test_alternation(self, make_series, seed):
        samples = random_series(make_series, seed)
        segments = split_by_reference(samples, 105)

        for left, right in zip(segments, segments[1:]):
            assert left.side is not right.side

    @pytest.mark.parametrize("seed", range(10))
    def test_boundaries_on_reference(self, make_series, seed):
        reference = 104.37
        samples = random_series(make_series, seed)
        segments = split_by_reference(samples, reference)

        crossings = [p for s in segments for p in s.points if p.synthetic]
        assert crossings
        assert all(abs(p.price - reference) <= EPS for p in crossings)

    @pytest.mark.parametrize("seed", range(10))
    def test_segments_have_two_points(self, make_series, seed):
        segments = split_by_reference(random_series(make_series, seed), 105)
        assert all(len(s) >= 2 for s in segments)

    @pytest.mark.parametrize("seed", range(5))
    def test_idempotent(self, make_series, seed):
        samples = random_series(make_series, seed)
        first = split_by_reference(samples, 105)
        second = split_by_reference(samples, 105)

        def flat(segments):
            return [(s.side, [(p.ts, p.price, p.synthetic) for p in s.points]) for s in segments]

        assert flat(first) == flat(second)
