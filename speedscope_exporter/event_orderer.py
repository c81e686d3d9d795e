from functools import cmp_to_key


def compare_profile_events(x, y):
    """
    Orders events the way a flame graph replays them: by time; at the same time opens before closes;
    then parents open before their children and children close before their parents.
    """
    if x.relative_time != y.relative_time:
        return -1 if x.relative_time < y.relative_time else 1

    if x.type != y.type:
        return -1 if x.is_open() else 1

    if x.is_open():
        return x.depth - y.depth
    return y.depth - x.depth


def sort_profile_events(profile_events):
    """
    :return: a new list with the events sorted with compare_profile_events; equal events keep their order
    """
    return sorted(profile_events, key=cmp_to_key(compare_profile_events))
