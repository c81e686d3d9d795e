import logging

from speedscope_exporter.configuration import ExporterConfiguration
from speedscope_exporter.event_orderer import sort_profile_events
from speedscope_exporter.interval_aggregator import get_aggregated_profile_events
from speedscope_exporter.metrics.timer import Timer
from speedscope_exporter.metrics.with_timer import with_timer
from speedscope_exporter.model.exported_profile import ExportedProfile
from speedscope_exporter.sample_collector import get_sorted_samples, InvalidSampleException
from speedscope_exporter.stack_walker import StackWalker, MalformedCallStackException
from speedscope_exporter.utils.log_exception import log_exception

logger = logging.getLogger(__name__)


class SpeedScopeExporter:
    """
    Converts the samples of a stack source into the frames and ordered Open/Close events of a SpeedScope
    evented profile.

    The export is all or nothing: the stages run one after the other, each one consuming the whole output of
    the previous one, and any error aborts the export of the trace without returning a partial profile.
    """

    def __init__(self, environment=dict()):
        """
        :param environment: dependency container dictionary for the exporter
        :param configuration: (inside environment) ExporterConfiguration; default is read from os.environ
        :param timer: (inside environment) timer to be used for the stage metrics; default is a new Timer
        :param stack_walker_factory: (inside environment) the factory to create stack walkers; default StackWalker
        """
        self.configuration = environment.get("configuration") or ExporterConfiguration.from_env()
        self.timer = environment.get("timer") or Timer()
        self.stack_walker_factory = environment.get("stack_walker_factory") or StackWalker

    def export(self, stack_source):
        """
        :param stack_source: the StackSource to convert
        :return: ExportedProfile
        :raises InvalidSampleException: if a sample has an invalid time or metric
        :raises MalformedCallStackException: if the call tree of the source has a cycle or is too deep
        """
        try:
            return self._export(stack_source)
        except (InvalidSampleException, MalformedCallStackException):
            log_exception(logger, "Aborting export of malformed trace")
            raise
        except Exception:
            log_exception(logger, "Unexpected error while exporting trace")
            raise

    def _export(self, stack_source):
        sorted_samples = self._get_sorted_samples(stack_source)
        logger.info("Exporting {} samples".format(len(sorted_samples)))

        stack_walker = self.stack_walker_factory(stack_source, configuration=self.configuration)
        frame_registry, frame_id_to_samples = self._walk_the_stack_and_expand_samples(stack_walker, sorted_samples)
        if stack_walker.dropped_frames_count:
            logger.debug("Skipped {} broken or invalid stack entries".format(stack_walker.dropped_frames_count))

        profile_events = self._aggregate_profile_events(frame_id_to_samples)
        profile = ExportedProfile(frame_names=list(frame_registry.names),
                                  events=self._sort_profile_events(profile_events))

        logger.info("Exported profile: " + str(profile))
        logger.debug("Export timings: " + str(self.timer.as_dict()))
        return profile

    @with_timer("getSortedSamples")
    def _get_sorted_samples(self, stack_source):
        return get_sorted_samples(stack_source)

    @with_timer("walkTheStackAndExpandSamples")
    def _walk_the_stack_and_expand_samples(self, stack_walker, sorted_samples):
        return stack_walker.walk_the_stack_and_expand_samples(sorted_samples)

    @with_timer("aggregateProfileEvents")
    def _aggregate_profile_events(self, frame_id_to_samples):
        return get_aggregated_profile_events(frame_id_to_samples)

    @with_timer("sortProfileEvents")
    def _sort_profile_events(self, profile_events):
        return sort_profile_events(profile_events)


def export_profile(stack_source, environment=dict()):
    return SpeedScopeExporter(environment=environment).export(stack_source)
