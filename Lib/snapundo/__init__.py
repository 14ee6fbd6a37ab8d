"""# snapundo

A small library to implement multi-level undo and redo with snapshots.

The main idea is that a document object can capture its complete state in an
immutable snapshot, and restore itself from one later. Snapshots are kept in
bounded histories: when a history is full, the oldest snapshot is dropped to
make room for the new one.

The library has three building blocks:

- `Document` owns the live content and a version number. Every mutation
  increments the version; restoring a snapshot sets the version to the one
  stored in the snapshot, which may be lower.
- `HistoryStack` is a bounded store of snapshots. It never looks inside them.
- `UndoRedoController` ties a document to an undo history and a redo history.

Here is an example:

    >>> from snapundo.textOps import appendText, setText
    >>> editor = UndoRedoController(undoCapacity=20, redoCapacity=20)
    >>> editor.perform(setText("Hello"), title="Set Text")
    >>> editor.currentContent(), editor.currentVersion()
    ('Hello', 1)
    >>> editor.perform(appendText(" World"), title="Append")
    >>> editor.currentContent(), editor.currentVersion()
    ('Hello World', 2)
    >>> editor.undo()
    True
    >>> editor.currentContent(), editor.currentVersion()
    ('Hello', 1)
    >>> editor.redo()
    True
    >>> editor.currentContent(), editor.currentVersion()
    ('Hello World', 2)

Any new edit after an undo clears the redo history:

    >>> editor.undo()
    True
    >>> editor.perform(appendText(", again"), title="Append")
    >>> editor.canRedo()
    False

Histories can also be used directly. Several histories may follow the same
document, each keeping its own selection of snapshots:

    >>> doc = Document("draft")
    >>> autosave = HistoryStack(capacity=5, name="Autosave")
    >>> autosave.push(doc.capture())
    >>> doc.mutate(lambda text: text + ", edited")
    >>> doc.restore(autosave.pop())
    True
    >>> doc.content
    'draft'

The library logs through the standard `logging` module, under the
"snapundo" logger.
"""

import logging

from .document import Document, Snapshot
from .errors import CapacityMisconfiguration, EmptyHistory, HistoryError, InvalidPosition
from .historyStack import HistoryStack
from .undoRedoController import UndoRedoController

__all__ = [
    "CapacityMisconfiguration",
    "Document",
    "EmptyHistory",
    "HistoryError",
    "HistoryStack",
    "InvalidPosition",
    "Snapshot",
    "UndoRedoController",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "<unknown>"
