import math


def get_sorted_samples(stack_source):
    """
    Collects every sample of the stack source, sorted by relative time. Samples taken at the same time keep
    the order in which the stack source returned them.

    :raises InvalidSampleException: if a sample has a negative or non finite time or metric
    """
    samples = list(stack_source.samples())
    for sample in samples:
        _validate(sample)
    samples.sort(key=_relative_time)
    return samples


def _relative_time(sample):
    return sample.relative_time


def _validate(sample):
    if not _is_valid_number(sample.relative_time):
        raise InvalidSampleException("Sample relative time must be a non negative number, got {}".format(sample))
    if not _is_valid_number(sample.metric):
        raise InvalidSampleException("Sample metric must be a non negative number, got {}".format(sample))


def _is_valid_number(value):
    return math.isfinite(value) and value >= 0


class InvalidSampleException(ValueError):
    pass
