import logging

from speedscope_exporter.configuration import ExporterConfiguration
from speedscope_exporter.model.frame_registry import FrameRegistry
from speedscope_exporter.model.sample import ExpandedSample
from speedscope_exporter.model.stack_source import CallStackIndex, FrameIndex

logger = logging.getLogger(__name__)


class StackWalker:
    """
    Expands every leaf sample into one ExpandedSample per resolvable frame of its stack.

    Broken and invalid frames are skipped without consuming a depth, so if a stack entry cannot be read its
    ancestors keep the depths they would have had without it, and the broken entry never gets a frame id.
    """

    def __init__(self, stack_source, configuration=None):
        self._stack_source = stack_source
        self._configuration = configuration or ExporterConfiguration()
        # leaf call stack index -> frame ids of its resolvable frames, root first
        self._resolved_stacks = {}
        self.frame_registry = FrameRegistry()
        self.dropped_frames_count = 0

    def walk_the_stack_and_expand_samples(self, sorted_samples):
        """
        :param sorted_samples: RawSample list sorted by relative time
        :return: (frame registry, dict of frame id -> ExpandedSample list in chronological order)
        :raises MalformedCallStackException: if a caller chain loops or is deeper than max_stack_depth
        """
        frame_id_to_samples = {}
        for sample in sorted_samples:
            frame_ids = self._resolve_stack(sample.call_stack_index)
            for depth, frame_id in enumerate(frame_ids):
                expanded_sample = ExpandedSample(
                    call_stack_index=sample.call_stack_index,
                    relative_time=sample.relative_time,
                    metric=sample.metric,
                    depth=depth)
                samples = frame_id_to_samples.get(frame_id)
                if samples is None:
                    samples = frame_id_to_samples[frame_id] = []
                samples.append(expanded_sample)
        return self.frame_registry, frame_id_to_samples

    def _resolve_stack(self, call_stack_index):
        frame_ids = self._resolved_stacks.get(call_stack_index)
        if frame_ids is None:
            frame_ids = self._resolved_stacks[call_stack_index] = \
                self._register_frames(reversed(self._get_caller_chain(call_stack_index)))
        return frame_ids

    def _get_caller_chain(self, call_stack_index):
        """
        :return: the call stack indexes from the leaf up to the root
        """
        max_depth = self._configuration.max_stack_depth
        chain = []
        visited = set()
        current = call_stack_index
        while current != CallStackIndex.INVALID:
            if current in visited:
                raise MalformedCallStackException(
                    "Call stack {} has a cycle through its caller {}".format(call_stack_index, current))
            if len(chain) >= max_depth:
                raise MalformedCallStackException(
                    "Call stack {} is deeper than the maximum stack depth {}".format(call_stack_index, max_depth))
            visited.add(current)
            chain.append(current)
            current = self._stack_source.get_caller_index(current)
        return chain

    def _register_frames(self, root_to_leaf_chain):
        frame_ids = []
        for call_stack_index in root_to_leaf_chain:
            frame_index = self._stack_source.get_frame_index(call_stack_index)
            if FrameIndex.is_unusable(frame_index):
                self.dropped_frames_count += 1
                logger.debug("Skipping unusable frame {} of call stack {}".format(frame_index, call_stack_index))
                continue
            name = self._stack_source.get_frame_name(
                frame_index, verbose_name=self._configuration.verbose_frame_names)
            frame_ids.append(self.frame_registry.get_or_add(name))
        return frame_ids


class MalformedCallStackException(Exception):
    pass
