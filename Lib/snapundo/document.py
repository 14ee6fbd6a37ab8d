from copy import deepcopy
from dataclasses import dataclass, field
import logging
import threading
from types import MappingProxyType
import typing


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Snapshot:

    """A Snapshot is an immutable capture of a Document's content and version.

    The captured content is opaque: it is not part of the repr, and there is
    no public accessor for it. Only Document.restore() reads it back, and it
    only ever hands out copies.

        >>> snap = Snapshot.create("Hello", 1, title="Set Text")
        >>> snap.version
        1
        >>> snap.describe()
        'Snapshot v1 (length: 5)'
        >>> snap
        Snapshot(version=1, info=mappingproxy({'title': 'Set Text'}))

    The info mapping holds arbitrary labels, for example an action name for
    an undo/redo menu item. It is read-only, like the rest of the snapshot.
    """

    version: int
    info: typing.Mapping = field(default_factory=dict)
    _payload: typing.Any = field(default=None, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    @classmethod
    def create(cls, payload, version, /, **info):
        return cls(version, info, deepcopy(payload))

    def describe(self):
        try:
            length = len(self._payload)
        except TypeError:
            return f"Snapshot v{self.version}"
        return f"Snapshot v{self.version} (length: {length})"


class Document:

    """A Document owns a piece of live content and a version counter. It can
    capture its state in a Snapshot, and restore itself from one.

        >>> doc = Document()
        >>> doc.mutate(lambda text: "Hello")
        >>> doc.content, doc.version
        ('Hello', 1)
        >>> snap = doc.capture()
        >>> doc.mutate(lambda text: text + " World")
        >>> doc.content, doc.version
        ('Hello World', 2)
        >>> doc.restore(snap)
        True
        >>> doc.content, doc.version
        ('Hello', 1)

    Note that restoring sets the version to the version stored in the
    snapshot, so the version can move backward. It only increases along an
    uninterrupted sequence of mutations.

    The content can be any object that copy.deepcopy() can handle.
    """

    def __init__(self, content=""):
        self.content = content
        self.version = 0
        self.lock = threading.RLock()

    def __repr__(self):
        return f"{self.__class__.__name__}(version={self.version})"

    def mutate(self, op):
        """Apply `op` to the content. `op` is a callable that takes the
        current content and returns the new content. The version is
        incremented only if `op` returns normally.
        """
        with self.lock:
            self.content = op(self.content)
            self.version += 1
            logger.debug("document mutated to version %d", self.version)

    def capture(self, /, **info):
        """Return a Snapshot of the current state. Keyword arguments form the
        info dict of the snapshot.
        """
        with self.lock:
            snapshot = Snapshot.create(self.content, self.version, **info)
        logger.debug("captured %s", snapshot.describe())
        return snapshot

    def restore(self, snapshot):
        """Restore content and version from `snapshot` and return True.

        If `snapshot` is None or not a Snapshot, nothing is restored: a
        warning is logged, the document is left unchanged and False is
        returned.
        """
        if not isinstance(snapshot, Snapshot):
            logger.warning("cannot restore from %r, document left at version %d",
                           snapshot, self.version)
            return False
        with self.lock:
            self.content = deepcopy(snapshot._payload)
            self.version = snapshot.version
        logger.debug("restored %s", snapshot.describe())
        return True
