class HistoryError(Exception):
    pass


class EmptyHistory(HistoryError, IndexError):
    """Raised by HistoryStack.pop() and HistoryStack.peek() when the history
    holds no snapshots.
    """


class InvalidPosition(HistoryError, IndexError):
    """Raised by HistoryStack.getAt() for a position outside the history."""


class CapacityMisconfiguration(HistoryError, ValueError):
    """Raised at construction time when a history capacity is not an integer
    of at least 1.
    """


def validateCapacity(capacity, what="capacity"):
    # bool is an int subclass, but True is not a sensible capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise CapacityMisconfiguration(f"{what} must be an int, got {capacity!r}")
    if capacity < 1:
        raise CapacityMisconfiguration(f"{what} must be at least 1, got {capacity}")
    return capacity
