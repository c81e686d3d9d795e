import logging
import os

# Environment variables that can override the defaults; see ExporterConfiguration.from_env
MAX_STACK_DEPTH_ENV = "SPEEDSCOPE_EXPORTER_MAX_STACK_DEPTH"
VERBOSE_FRAME_NAMES_ENV = "SPEEDSCOPE_EXPORTER_VERBOSE_FRAME_NAMES"

DEFAULT_MAX_STACK_DEPTH = 10000
DEFAULT_VERBOSE_FRAME_NAMES = False

logger = logging.getLogger(__name__)


class ExporterConfiguration:
    """
    Holds the settings of an export. Values left to None fall back to the defaults.
    """

    def __init__(self, max_stack_depth=None, verbose_frame_names=None):
        """
        :param max_stack_depth: the longest call stack chain we accept before treating the stack source as
            malformed (default: 10000)
        :param verbose_frame_names: ask the stack source for verbose frame names (default: False)
        """
        self._max_stack_depth = max_stack_depth
        self._verbose_frame_names = verbose_frame_names
        if self.max_stack_depth <= 0:
            raise ValueError(
                "Configuration issue: max_stack_depth must be bigger than 0, got {}".format(self.max_stack_depth))

    @property
    def max_stack_depth(self):
        return self._max_stack_depth if self._max_stack_depth is not None else DEFAULT_MAX_STACK_DEPTH

    @property
    def verbose_frame_names(self):
        return self._verbose_frame_names if self._verbose_frame_names is not None else DEFAULT_VERBOSE_FRAME_NAMES

    def as_dict(self):
        values = {
            "max_stack_depth": self._max_stack_depth,
            "verbose_frame_names": self._verbose_frame_names
        }
        return {key: value for key, value in values.items() if value is not None}

    @classmethod
    def from_env(cls, env=os.environ):
        configuration = cls(
            max_stack_depth=cls._get_int_value_from(env, MAX_STACK_DEPTH_ENV),
            verbose_frame_names=cls._get_bool_value_from(env, VERBOSE_FRAME_NAMES_ENV))
        logger.debug("Exporter configuration from environment: " + str(configuration.as_dict()))
        return configuration

    @staticmethod
    def _get_int_value_from(env, key):
        value = env.get(key)
        if not value:
            return None
        try:
            int_value = int(value)
        except ValueError:
            logger.info("The environment contains invalid integer value '{}' for key '{}'.".format(value, key))
            return None
        if int_value <= 0:
            logger.info("Ignoring non positive value '{}' for key '{}'.".format(value, key))
            return None
        return int_value

    @staticmethod
    def _get_bool_value_from(env, key):
        """
        Any value other than "true" (case-insensitive) is read as False.
        """
        value = env.get(key)
        if value is None:
            return None
        return value.strip().lower() == "true"
