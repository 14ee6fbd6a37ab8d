from copy import deepcopy
import logging

from .document import Document
from .errors import validateCapacity
from .historyStack import HistoryStack


logger = logging.getLogger(__name__)


class UndoRedoController:

    """An UndoRedoController combines a Document with an undo history and a
    redo history, each a HistoryStack with its own capacity.

        >>> editor = UndoRedoController(undoCapacity=20, redoCapacity=20)

    Edits are done through perform(), which records the current state of the
    document in the undo history before applying the operation. An operation
    is a callable that takes the current content and returns the new content.

        >>> editor.perform(lambda text: "Hello", title="Set Text")
        >>> editor.perform(lambda text: text + " World", title="Append")
        >>> editor.currentContent(), editor.currentVersion()
        ('Hello World', 2)

    The most recent edit is rolled back by calling undo():

        >>> editor.undo()
        True
        >>> editor.currentContent(), editor.currentVersion()
        ('Hello', 1)

    Redo works similarly:

        >>> editor.redo()
        True
        >>> editor.currentContent(), editor.currentVersion()
        ('Hello World', 2)

    The keyword arguments passed to perform() for the topmost undo entry can
    be retrieved like this:

        >>> editor.undoInfo()
        {'title': 'Append'}

    Likewise for redo. undoInfo() and redoInfo() return None if their
    respective history is empty:

        >>> editor.redoInfo() is None
        True

    Doing undo or redo when its respective history is empty does nothing and
    returns False:

        >>> editor.redo()
        False

    Any new edit clears the redo history, so redo is only possible directly
    after one or more undos.

    UndoRedoController() has an optional argument called `changeMonitor`,
    which should be a callable taking one positional argument. It will be
    called with the document after every perform(), undo() or redo() that
    changed the document.
    """

    def __init__(self, document=None, undoCapacity=20, redoCapacity=20, changeMonitor=None):
        validateCapacity(undoCapacity, "undoCapacity")
        validateCapacity(redoCapacity, "redoCapacity")
        if document is None:
            document = Document()
        self.document = document
        self.undoHistory = HistoryStack(undoCapacity, name="Undo")
        self.redoHistory = HistoryStack(redoCapacity, name="Redo")
        self._changeMonitor = changeMonitor

    def perform(self, op, /, **info):
        """Record the current state in the undo history, apply `op` to the
        document and clear the redo history.

        Keyword arguments form the info dict of the undo entry. One use for
        this is to specify an action name for an undo/redo menu item.

        If `op` raises an exception, nothing is recorded and the exception is
        propagated; the document and both histories are left as they were.
        """
        with self.document.lock:
            snapshot = self.document.capture(**info)
            self.document.mutate(op)
            # push only after a successful mutation, a full history evicts
            self.undoHistory.push(snapshot)
            self.redoHistory.clear()
        if self._changeMonitor is not None:
            self._changeMonitor(self.document)

    def undo(self):
        """Restore the state on the top of the undo history, and remove it
        from the history. The state it replaces is pushed on the redo
        history.

        Return True if an undo occurred, False if there was nothing to undo.
        """
        return self._performUndo(self.undoHistory, self.redoHistory, "undo")

    def redo(self):
        """Restore the state on the top of the redo history, and remove it
        from the history. The state it replaces is pushed on the undo
        history.

        Return True if a redo occurred, False if there was nothing to redo.
        """
        return self._performUndo(self.redoHistory, self.undoHistory, "redo")

    def _performUndo(self, popHistory, pushHistory, action):
        with self.document.lock:
            if popHistory.isEmpty():
                logger.debug("nothing to %s", action)
                return False
            # the entry for the other history inherits the labels of the
            # entry being undone or redone
            info = popHistory.peek().info
            pushHistory.push(self.document.capture(**info))
            self.document.restore(popHistory.pop())
            logger.debug("%s to version %d", action, self.document.version)
        if self._changeMonitor is not None:
            self._changeMonitor(self.document)
        return True

    def canUndo(self):
        return not self.undoHistory.isEmpty()

    def canRedo(self):
        return not self.redoHistory.isEmpty()

    def undoInfo(self):
        """Return the info dict for the top entry of the undo history, or
        None if the history is empty.
        """
        if self.undoHistory.isEmpty():
            return None
        return dict(self.undoHistory.peek().info)

    def redoInfo(self):
        """Return the info dict for the top entry of the redo history, or
        None if the history is empty.
        """
        if self.redoHistory.isEmpty():
            return None
        return dict(self.redoHistory.peek().info)

    def currentContent(self):
        with self.document.lock:
            return deepcopy(self.document.content)

    def currentVersion(self):
        return self.document.version

    def clearHistory(self):
        """Empty both histories. The document is left as it is."""
        with self.document.lock:
            self.undoHistory.clear()
            self.redoHistory.clear()

    def describeHistory(self):
        lines = []
        for history in (self.undoHistory, self.redoHistory):
            lines.append(f"{history.name} history ({history.size()} items):")
            lines.extend("  " + line for line in history.describeHistory())
        return lines
