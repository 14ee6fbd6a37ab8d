from collections import deque
import logging
import threading

from .errors import EmptyHistory, InvalidPosition, validateCapacity


logger = logging.getLogger(__name__)


class HistoryStack:

    """A HistoryStack is a bounded store of Snapshots. It behaves like a stack
    at the top: push(), pop() and peek() work on the most recent entry. When
    the stack is full, push() first evicts the oldest entry from the bottom.

        >>> from snapundo.document import Document
        >>> doc = Document()
        >>> history = HistoryStack(capacity=3, name="Autosave")
        >>> for i in range(5):
        ...     doc.mutate(lambda text: text + "x")
        ...     history.push(doc.capture())
        ...
        >>> history.size()
        3
        >>> [snap.version for snap in history]
        [5, 4, 3]
        >>> history.getAt(2).version
        3

    A HistoryStack never looks inside the snapshots it stores.

    pop() and peek() raise EmptyHistory when the stack is empty, and getAt()
    raises InvalidPosition for a position that is out of range. The capacity
    must be an int of at least 1, or CapacityMisconfiguration is raised.
    """

    def __init__(self, capacity=10, name="History"):
        self._capacity = validateCapacity(capacity)
        self._name = name
        self._items = deque()  # bottom (oldest) on the left, top on the right
        self._lock = threading.Lock()

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self._name!r}, size={len(self._items)}, capacity={self._capacity})"

    @property
    def capacity(self):
        return self._capacity

    @property
    def name(self):
        return self._name

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        with self._lock:
            items = list(self._items)
        return reversed(items)

    def push(self, snapshot):
        with self._lock:
            if len(self._items) >= self._capacity:
                oldest = self._items.popleft()
                logger.debug("[%s] evicted oldest %s", self._name, oldest.describe())
            self._items.append(snapshot)
            size = len(self._items)
        logger.debug("[%s] pushed %s, size %d", self._name, snapshot.describe(), size)

    def pop(self):
        with self._lock:
            if not self._items:
                raise EmptyHistory(f"{self._name}: empty history")
            snapshot = self._items.pop()
            size = len(self._items)
        logger.debug("[%s] popped %s, size %d", self._name, snapshot.describe(), size)
        return snapshot

    def peek(self):
        with self._lock:
            if not self._items:
                raise EmptyHistory(f"{self._name}: empty history")
            return self._items[-1]

    def getAt(self, position):
        """Return the snapshot at `position`, where 0 is the most recent
        entry, and size() - 1 the oldest.
        """
        with self._lock:
            if not (0 <= position < len(self._items)):
                raise InvalidPosition(f"{self._name}: invalid position {position}")
            return self._items[-1 - position]

    def size(self):
        return len(self._items)

    def isEmpty(self):
        return not self._items

    def clear(self):
        with self._lock:
            self._items.clear()
        logger.debug("[%s] cleared", self._name)

    def describeHistory(self):
        """Return a list of lines describing the stored snapshots, most
        recent first.
        """
        return [f"{position}. {snapshot.describe()}" for position, snapshot in enumerate(self)]
