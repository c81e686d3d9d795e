import pytest

from speedscope_exporter.interval_aggregator import get_aggregated_profile_events
from speedscope_exporter.model.profile_event import ProfileEventType
from speedscope_exporter.model.sample import ExpandedSample

METRIC = 0.1


def samples_at(times, depth=0, metric=METRIC):
    return [ExpandedSample(call_stack_index=1, relative_time=time, metric=metric, depth=depth) for time in times]


def as_tuples(events):
    return [(event.type, event.relative_time) for event in events]


class TestGetAggregatedProfileEvents:
    def test_continuous_samples_are_aggregated_to_one_interval(self):
        events = get_aggregated_profile_events({0: samples_at([0.1, 0.2, 0.3, 0.4])})

        # an Open at the first sample and a Close at the last one
        assert (as_tuples(events) == [(ProfileEventType.OPEN, 0.1), (ProfileEventType.CLOSE, 0.4)])

    def test_continuous_samples_with_pauses_are_aggregated_to_multiple_intervals(self):
        events = get_aggregated_profile_events({0: samples_at([0.1, 0.2, 0.7, 1.1, 1.2, 1.3])})

        # <0.1, 0.2>, <0.7, 0.75> as a zero width <0.7, 0.7> would not be visible, and <1.1, 1.3>
        assert (as_tuples(events) == [
            (ProfileEventType.OPEN, 0.1), (ProfileEventType.CLOSE, 0.2),
            (ProfileEventType.OPEN, 0.7), (ProfileEventType.CLOSE, 0.7 + METRIC / 2),
            (ProfileEventType.OPEN, 1.1), (ProfileEventType.CLOSE, 1.3),
        ])

    def test_a_single_sample_is_closed_after_half_of_its_metric(self):
        events = get_aggregated_profile_events({0: samples_at([2.0], metric=1.0)})

        assert (as_tuples(events) == [(ProfileEventType.OPEN, 2.0), (ProfileEventType.CLOSE, 2.5)])

    def test_a_gap_equal_to_the_metric_keeps_the_interval_open(self):
        events = get_aggregated_profile_events({0: samples_at([1.0, 2.0], metric=1.0)})

        assert (as_tuples(events) == [(ProfileEventType.OPEN, 1.0), (ProfileEventType.CLOSE, 2.0)])

    def test_a_gap_just_above_the_metric_closes_the_interval(self):
        events = get_aggregated_profile_events({0: samples_at([1.0, 2.001], metric=1.0)})

        assert (as_tuples(events) == [
            (ProfileEventType.OPEN, 1.0), (ProfileEventType.CLOSE, 1.5),
            (ProfileEventType.OPEN, 2.001), (ProfileEventType.CLOSE, 2.501),
        ])

    def test_the_metric_of_the_earlier_sample_decides_if_a_gap_is_a_pause(self):
        # Assumes the threshold is the metric of the previous sample when sampling intervals vary
        samples = [
            ExpandedSample(call_stack_index=1, relative_time=1.0, metric=2.0, depth=0),
            ExpandedSample(call_stack_index=1, relative_time=2.5, metric=0.5, depth=0),
            ExpandedSample(call_stack_index=1, relative_time=3.5, metric=0.5, depth=0),
        ]

        events = get_aggregated_profile_events({0: samples})

        assert (as_tuples(events) == [
            (ProfileEventType.OPEN, 1.0), (ProfileEventType.CLOSE, 2.5),
            (ProfileEventType.OPEN, 3.5), (ProfileEventType.CLOSE, 3.75),
        ])

    def test_samples_at_different_depths_form_separate_intervals(self):
        samples = samples_at([0.1], depth=1) + samples_at([0.15], depth=2) + samples_at([0.2], depth=1)

        events = get_aggregated_profile_events({0: samples})

        assert ([(event.type, event.depth, event.relative_time) for event in events] == [
            (ProfileEventType.OPEN, 1, 0.1), (ProfileEventType.CLOSE, 1, 0.2),
            (ProfileEventType.OPEN, 2, 0.15), (ProfileEventType.CLOSE, 2, 0.15 + METRIC / 2),
        ])

    def test_events_carry_the_frame_id_and_depth(self):
        events = get_aggregated_profile_events({3: samples_at([0.1, 0.2], depth=4)})

        assert (all(event.frame_id == 3 and event.depth == 4 for event in events))

    def test_each_frame_gets_its_own_intervals(self):
        events = get_aggregated_profile_events({
            0: samples_at([0.1, 0.2, 0.3]),
            1: samples_at([0.2], depth=1),
        })

        assert (len(events) == 4)
        assert ([event.frame_id for event in events] == [0, 0, 1, 1])

    @pytest.mark.parametrize("frame_id_to_samples", [{}, {0: []}])
    def test_it_returns_no_events_without_samples(self, frame_id_to_samples):
        assert (get_aggregated_profile_events(frame_id_to_samples) == [])
