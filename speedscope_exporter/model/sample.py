UNKNOWN_DEPTH = -1


class RawSample:
    __slots__ = ("call_stack_index", "relative_time", "metric")

    def __init__(self, call_stack_index, relative_time, metric):
        """
        :param call_stack_index: the leaf of the sampled stack in the call tree of the stack source
        :param relative_time: time (in ms) since the start of the trace when the sample was taken
        :param metric: the weight of the sample, usually the time slice it stands for (in ms)
        """
        self.call_stack_index = call_stack_index
        self.relative_time = relative_time
        self.metric = metric

    def __eq__(self, other):
        return isinstance(other, RawSample) and self.call_stack_index == other.call_stack_index \
            and self.relative_time == other.relative_time and self.metric == other.metric

    def __repr__(self):
        return "RawSample(call_stack_index={}, relative_time={}, metric={})".format(
            self.call_stack_index, self.relative_time, self.metric)


class ExpandedSample:
    # One of these exists per (leaf sample, valid ancestor frame) pair so we keep them small.
    __slots__ = ("call_stack_index", "relative_time", "metric", "depth")

    def __init__(self, call_stack_index, relative_time, metric, depth=UNKNOWN_DEPTH):
        self.call_stack_index = call_stack_index
        self.relative_time = relative_time
        self.metric = metric
        self.depth = depth

    def __eq__(self, other):
        return isinstance(other, ExpandedSample) and self.call_stack_index == other.call_stack_index \
            and self.relative_time == other.relative_time and self.metric == other.metric \
            and self.depth == other.depth

    def __repr__(self):
        return "ExpandedSample(call_stack_index={}, relative_time={}, metric={}, depth={})".format(
            self.call_stack_index, self.relative_time, self.metric, self.depth)
