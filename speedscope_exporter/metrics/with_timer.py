import functools

from time import perf_counter
from time import process_time

CPU_TIME = "cpu-time"
WALL_CLOCK_TIME = "wall-clock-time"


def with_timer(metric_name, measurement=CPU_TIME):
    """
    Records how long the decorated method takes into `self.timer`; the method runs untimed when the
    object has no timer.
    """
    if measurement == CPU_TIME:
        get_time_seconds = process_time
    elif measurement == WALL_CLOCK_TIME:
        get_time_seconds = perf_counter
    else:
        raise ValueError(
            "Unexpected measurement mode for timer '{}'".format(str(measurement)))

    def wrapper(fn):
        @functools.wraps(fn)
        def timed(self, *args, **kwargs):
            if self.timer is None:
                return fn(self, *args, **kwargs)
            time_start_seconds = get_time_seconds()
            try:
                return fn(self, *args, **kwargs)
            finally:
                self.timer.record(metric_name, get_time_seconds() - time_start_seconds)

        return timed

    return wrapper
