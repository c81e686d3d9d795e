import math

from speedscope_exporter.model.profile_event import ProfileEvent, ProfileEventType

# Metrics often come from single precision counters, so a gap that equals the metric up to this relative
# error still counts as continuous activity.
CONTINUITY_RELATIVE_TOLERANCE = 1e-6


def get_aggregated_profile_events(frame_id_to_samples):
    """
    Turns the chronological samples of every frame into the Open/Close events of its activity intervals.

    Consecutive samples of the same frame at the same depth belong to one interval as long as the time
    between them is not bigger than the metric of the earlier one; a bigger gap means the frame was not
    running in between, so the interval is closed and a new one is opened.

    :param frame_id_to_samples: dict of frame id -> ExpandedSample list sorted by relative time
    :return: unsorted ProfileEvent list
    """
    profile_events = []
    for frame_id, samples in frame_id_to_samples.items():
        for depth_samples in _group_by_depth(samples):
            _add_interval_events(frame_id, depth_samples, profile_events)
    return profile_events


def _group_by_depth(samples):
    depth_to_samples = {}
    for sample in samples:
        group = depth_to_samples.get(sample.depth)
        if group is None:
            group = depth_to_samples[sample.depth] = []
        group.append(sample)
    return depth_to_samples.values()


def _add_interval_events(frame_id, samples, profile_events):
    if not samples:
        return
    first = samples[0]
    run_length = 1
    profile_events.append(ProfileEvent(ProfileEventType.OPEN, frame_id, first.depth, first.relative_time))

    previous = first
    for sample in samples[1:]:
        if not _is_continuous(previous, sample):
            profile_events.append(_close_event(frame_id, previous, run_length))
            profile_events.append(ProfileEvent(ProfileEventType.OPEN, frame_id, sample.depth, sample.relative_time))
            run_length = 0
        run_length += 1
        previous = sample

    profile_events.append(_close_event(frame_id, previous, run_length))


def _is_continuous(previous, sample):
    gap = sample.relative_time - previous.relative_time
    return gap <= previous.metric or math.isclose(gap, previous.metric, rel_tol=CONTINUITY_RELATIVE_TOLERANCE)


def _close_event(frame_id, last, run_length):
    if run_length > 1:
        close_time = last.relative_time
    else:
        # a single sample would be a zero width interval; give it half of its metric so it stays visible
        close_time = last.relative_time + last.metric / 2
    return ProfileEvent(ProfileEventType.CLOSE, frame_id, last.depth, close_time)
