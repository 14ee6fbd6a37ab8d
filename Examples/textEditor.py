from snapundo import UndoRedoController
from snapundo.textOps import appendText, clearText, insertText, setText


if __name__ == "__main__":
    editor = UndoRedoController()
    editor.perform(setText("Once upon a time"), title="Write")
    editor.perform(appendText(" in a land far away"), title="Append")
    editor.perform(appendText(", there lived a programmer"), title="Append")
    editor.perform(insertText(17, "magical "), title="Insert")
    assert editor.currentContent() == "Once upon a time magical in a land far away, there lived a programmer"
    assert editor.currentVersion() == 4
    assert editor.canUndo()
    assert not editor.canRedo()
    print("\n".join(editor.describeHistory()))

    assert editor.undoInfo() == {"title": "Insert"}
    editor.undo()
    editor.undo()
    editor.undo()
    assert editor.currentContent() == "Once upon a time"
    assert editor.currentVersion() == 1
    assert editor.redoInfo() == {"title": "Append"}

    editor.redo()
    editor.redo()
    assert editor.currentContent() == "Once upon a time in a land far away, there lived a programmer"
    assert editor.canRedo()

    editor.undo()
    editor.perform(appendText(" and they coded happily ever after"), title="Append")
    assert not editor.canRedo()
    assert editor.currentContent() == "Once upon a time in a land far away and they coded happily ever after"

    # an invalid insertion leaves document and histories untouched
    version = editor.currentVersion()
    undoSize = editor.undoHistory.size()
    try:
        editor.perform(insertText(1000, "nowhere"), title="Insert")
    except ValueError:
        pass
    else:
        assert 0, "expected ValueError"
    assert editor.currentVersion() == version
    assert editor.undoHistory.size() == undoSize

    editor.perform(clearText(), title="Clear")
    assert editor.currentContent() == ""
    editor.undo()
    assert editor.currentContent() == "Once upon a time in a land far away and they coded happily ever after"
