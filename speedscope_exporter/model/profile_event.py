class ProfileEventType:
    OPEN = "O"
    CLOSE = "C"


class ProfileEvent:
    __slots__ = ("type", "frame_id", "depth", "relative_time")

    def __init__(self, type, frame_id, depth, relative_time):
        """
        A boundary of one frame activity interval in the flame graph timeline.

        :param type: ProfileEventType.OPEN or ProfileEventType.CLOSE; the values are the ones used by the
            SpeedScope evented profile format
        :param frame_id: id of the frame in the FrameRegistry
        :param depth: distance of the frame from the root of the stack it was observed in
        :param relative_time: time (in ms) since the start of the trace
        """
        self.type = type
        self.frame_id = frame_id
        self.depth = depth
        self.relative_time = relative_time

    def is_open(self):
        return self.type == ProfileEventType.OPEN

    def __eq__(self, other):
        return isinstance(other, ProfileEvent) and self.type == other.type and self.frame_id == other.frame_id \
            and self.depth == other.depth and self.relative_time == other.relative_time

    def __repr__(self):
        return "ProfileEvent(type={}, frame_id={}, depth={}, relative_time={})".format(
            self.type, self.frame_id, self.depth, self.relative_time)
