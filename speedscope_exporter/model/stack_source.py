from abc import ABCMeta, abstractmethod

from speedscope_exporter.model.sample import RawSample


class CallStackIndex:
    INVALID = -1
    FIRST = 1


class FrameIndex:
    INVALID = -1
    ROOT = 0
    BROKEN = 1
    UNKNOWN = 2
    OVERHEAD = 3
    DISCARD = 4
    FIRST = 5

    @staticmethod
    def is_unusable(frame_index):
        return frame_index == FrameIndex.BROKEN or frame_index == FrameIndex.INVALID


class StackSource(metaclass=ABCMeta):  # pragma: no cover
    """
    A sampled trace: the samples and the call tree their stacks point into.
    """

    @abstractmethod
    def samples(self):
        """
        :return: iterable of RawSample, every sample exactly once, in any order.
        """
        pass

    @abstractmethod
    def get_caller_index(self, call_stack_index):
        """
        :return: the call stack index of the caller, or CallStackIndex.INVALID at the root.
        """
        pass

    @abstractmethod
    def get_frame_index(self, call_stack_index):
        """
        :return: the frame index at this point of the call tree; may be FrameIndex.BROKEN or FrameIndex.INVALID.
        """
        pass

    @abstractmethod
    def get_frame_name(self, frame_index, verbose_name=False):
        """
        :return: the display name of the frame; only called for usable frame indexes.
        """
        pass


class MemoryStackSource(StackSource):
    """
    StackSource holding its call tree and samples in memory.

    Either build the call tree explicitly with add_frame/add_call_stack/add_sample, or let add_stack intern
    a root to leaf list of frame names, reusing call stack entries shared with previously added stacks.
    """

    def __init__(self):
        self._frame_names = {}
        self._frame_name_to_index = {}
        self._next_frame_index = FrameIndex.FIRST
        # call_stack_index -> (frame_index, caller_index)
        self._call_stacks = {}
        self._call_stack_lookup = {}
        self._next_call_stack_index = CallStackIndex.FIRST
        self._samples = []

    def add_frame(self, name):
        frame_index = self._frame_name_to_index.get(name)
        if frame_index is None:
            frame_index = self._next_frame_index
            self._next_frame_index += 1
            self._frame_names[frame_index] = name
            self._frame_name_to_index[name] = frame_index
        return frame_index

    def add_call_stack(self, frame_index, caller_index=CallStackIndex.INVALID):
        key = (frame_index, caller_index)
        call_stack_index = self._call_stack_lookup.get(key)
        if call_stack_index is None:
            call_stack_index = self._next_call_stack_index
            self._next_call_stack_index += 1
            self._call_stacks[call_stack_index] = key
            self._call_stack_lookup[key] = call_stack_index
        return call_stack_index

    def add_sample(self, call_stack_index, relative_time, metric=1.0):
        sample = RawSample(call_stack_index=call_stack_index, relative_time=relative_time, metric=metric)
        self._samples.append(sample)
        return sample

    def add_stack(self, names, relative_time, metric=1.0):
        """
        :param names: frame names of the sampled stack, root first; None stands for a broken frame
        """
        call_stack_index = CallStackIndex.INVALID
        for name in names:
            frame_index = FrameIndex.BROKEN if name is None else self.add_frame(name)
            call_stack_index = self.add_call_stack(frame_index, caller_index=call_stack_index)
        return self.add_sample(call_stack_index, relative_time, metric)

    def samples(self):
        return iter(self._samples)

    def get_caller_index(self, call_stack_index):
        return self._call_stacks[call_stack_index][1]

    def get_frame_index(self, call_stack_index):
        if call_stack_index == CallStackIndex.INVALID:
            return FrameIndex.INVALID
        return self._call_stacks[call_stack_index][0]

    def get_frame_name(self, frame_index, verbose_name=False):
        return self._frame_names[frame_index]
