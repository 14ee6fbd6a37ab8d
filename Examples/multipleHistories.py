from snapundo import Document, HistoryStack
from snapundo.textOps import appendText, setText


if __name__ == "__main__":
    doc = Document()
    autosave = HistoryStack(capacity=5, name="Autosave")
    manualSave = HistoryStack(capacity=10, name="ManualSave")

    doc.mutate(setText("Document draft 1"))
    autosave.push(doc.capture())
    doc.mutate(appendText(" - with modifications"))
    autosave.push(doc.capture())
    manualSave.push(doc.capture())
    doc.mutate(appendText(" - final version"))

    assert [snap.version for snap in autosave] == [2, 1]
    assert [snap.version for snap in manualSave] == [2]
    print("\n".join(autosave.describeHistory()))
    print("\n".join(manualSave.describeHistory()))

    assert doc.restore(manualSave.pop())
    assert doc.content == "Document draft 1 - with modifications"
    assert doc.version == 2

    # restoring an older snapshot moves the version backward
    assert doc.restore(autosave.getAt(1))
    assert doc.content == "Document draft 1"
    assert doc.version == 1

    # a small autosave history only keeps the most recent snapshots
    for i in range(1, 7):
        doc.mutate(setText(f"Text version {i}"))
        autosave.push(doc.capture())
    assert autosave.size() == 5
    assert [snap.version for snap in autosave] == [7, 6, 5, 4, 3]
