class FrameRegistry:
    """
    Assigns dense integer ids to frame names in the order they are first seen. The id of a frame is its
    position in `names`, which is what the SpeedScope shared frames table expects.
    """

    def __init__(self):
        self.names = []
        self._name_to_id = {}

    def get_or_add(self, name):
        frame_id = self._name_to_id.get(name)
        if frame_id is None:
            frame_id = self._name_to_id[name] = len(self.names)
            self.names.append(name)
        return frame_id

    def get_id(self, name):
        return self._name_to_id.get(name)

    def __contains__(self, name):
        return name in self._name_to_id

    def __getitem__(self, name):
        return self._name_to_id[name]

    def __len__(self):
        return len(self.names)
