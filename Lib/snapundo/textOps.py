"""Operation factories for documents with str content.

Each factory returns a callable that takes the current text and returns the
new text, suitable for Document.mutate() and UndoRedoController.perform():

    >>> from snapundo import UndoRedoController
    >>> editor = UndoRedoController()
    >>> editor.perform(setText("Once upon a time"))
    >>> editor.perform(insertText(10, "magical "))
    >>> editor.currentContent()
    'Once upon magical a time'
"""


def setText(text):
    def op(content):
        return text
    return op


def appendText(text):
    def op(content):
        return content + text
    return op


def insertText(position, text):
    def op(content):
        if not (0 <= position <= len(content)):
            raise ValueError(f"invalid insertion position: {position}")
        return content[:position] + text + content[position:]
    return op


def clearText():
    def op(content):
        return ""
    return op
