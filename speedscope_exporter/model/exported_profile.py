DEFAULT_UNIT = "milliseconds"


class ExportedProfile:
    def __init__(self, frame_names, events, unit=DEFAULT_UNIT):
        """
        The result of an export, ready to be encoded as a SpeedScope evented profile.

        :param frame_names: names of the frames; the position of a name is the frame id used by the events
        :param events: ProfileEvent list in the order the flame graph must replay them
        :param unit: unit of the event times
        """
        self.frame_names = frame_names
        self.events = events
        self.unit = unit

    @property
    def start_value(self):
        return self.events[0].relative_time if self.events else 0

    @property
    def end_value(self):
        return self.events[-1].relative_time if self.events else 0

    def is_empty(self):
        return not self.events

    def __str__(self):
        return "ExportedProfile(frames=" + str(len(self.frame_names)) \
               + ", events=" + str(len(self.events)) \
               + ", start_value=" + str(self.start_value) \
               + ", end_value=" + str(self.end_value) \
               + ")"
