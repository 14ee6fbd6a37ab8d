import dataclasses
import logging
import pytest
from snapundo.document import Document, Snapshot


class TestSnapshot:

    def test_create(self):
        snap = Snapshot.create("Hello", 3, title="Set Text")
        assert snap.version == 3
        assert snap.info == {"title": "Set Text"}

    def test_describe(self):
        snap = Snapshot.create("Hello World", 2)
        assert snap.describe() == "Snapshot v2 (length: 11)"
        snap = Snapshot.create(12345, 7)
        assert snap.describe() == "Snapshot v7"

    def test_payload_not_exposed(self):
        snap = Snapshot.create("Confidential data", 1)
        assert "Confidential" not in repr(snap)
        assert "Confidential" not in str(snap)
        assert "Confidential" not in snap.describe()
        assert not hasattr(snap, "payload")

    def test_immutable(self):
        snap = Snapshot.create("abc", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.version = 2
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap._payload = "xyz"

    def test_info_immutable(self):
        info = {"title": "Set"}
        snap = Snapshot(1, info)
        info["title"] = "changed"
        assert snap.info == {"title": "Set"}
        with pytest.raises(TypeError):
            snap.info["title"] = "changed"
        with pytest.raises(TypeError):
            del snap.info["title"]
        assert snap.info == {"title": "Set"}

    def test_info_named_like_parameters(self):
        snap = Snapshot.create("abc", 4, version="2.0", payload="p")
        assert snap.version == 4
        assert snap.info == {"version": "2.0", "payload": "p"}
        assert snap.describe() == "Snapshot v4 (length: 3)"
        doc = Document("abc")
        snap = doc.capture(self="x", version="2.0")
        assert snap.version == 0
        assert snap.info == {"self": "x", "version": "2.0"}

    def test_payload_copied(self):
        content = ["a", "b"]
        snap = Snapshot.create(content, 1)
        content.append("c")
        assert snap.describe() == "Snapshot v1 (length: 2)"


class TestDocument:

    def test_initial_state(self):
        doc = Document()
        assert doc.content == ""
        assert doc.version == 0
        doc = Document([1, 2, 3])
        assert doc.content == [1, 2, 3]
        assert doc.version == 0

    def test_mutate(self):
        doc = Document()
        doc.mutate(lambda text: "Hello")
        assert doc.content == "Hello"
        assert doc.version == 1
        doc.mutate(lambda text: text + " World")
        assert doc.content == "Hello World"
        assert doc.version == 2

    def test_mutate_error(self):
        doc = Document("abc")

        def badOp(text):
            raise ValueError("test")

        with pytest.raises(ValueError):
            doc.mutate(badOp)
        assert doc.content == "abc"
        assert doc.version == 0

    def test_capture_restore(self):
        doc = Document()
        doc.mutate(lambda text: "Hello World")
        snap = doc.capture()
        assert snap.version == 1
        doc.mutate(lambda text: "Hello Universe")
        assert doc.restore(snap)
        assert doc.content == "Hello World"
        assert doc.version == 1

    def test_capture_is_independent(self):
        doc = Document({"items": [1, 2]})
        snap = doc.capture()

        def addItem(content):
            content["items"].append(3)
            return content

        doc.mutate(addItem)
        assert doc.content == {"items": [1, 2, 3]}
        doc.restore(snap)
        assert doc.content == {"items": [1, 2]}
        # the restored content must not share state with the snapshot
        doc.mutate(addItem)
        doc.restore(snap)
        assert doc.content == {"items": [1, 2]}

    def test_restore_moves_version_backward(self):
        doc = Document()
        doc.mutate(lambda text: "v1")
        old = doc.capture()
        for i in range(5):
            doc.mutate(lambda text: text + "!")
        assert doc.version == 6
        doc.restore(old)
        assert doc.version == 1
        assert doc.content == "v1"
        doc.mutate(lambda text: "v2")
        assert doc.version == 2

    def test_restore_same_snapshot_twice(self):
        doc = Document("a")
        snap = doc.capture()
        doc.mutate(lambda text: "b")
        assert doc.restore(snap)
        doc.mutate(lambda text: "c")
        assert doc.restore(snap)
        assert doc.content == "a"
        assert doc.version == 0

    @pytest.mark.parametrize("notASnapshot", [None, "Hello", object()])
    def test_invalid_restore(self, notASnapshot, caplog):
        doc = Document()
        doc.mutate(lambda text: "Hello")
        with caplog.at_level(logging.WARNING, logger="snapundo"):
            assert not doc.restore(notASnapshot)
        assert doc.content == "Hello"
        assert doc.version == 1
        assert "cannot restore" in caplog.text

    def test_capture_info(self):
        doc = Document()
        snap = doc.capture(title="before append")
        assert snap.info == {"title": "before append"}
