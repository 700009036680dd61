import pytest

from i2pcontrol.document import ElementNotFound, MemoryDocument, StreamlitDocument, update_document


def test_update_document_writes_only_named_element():
    doc = MemoryDocument(["field1", "field2"])
    update_document({"field1": "OK"}, doc)

    assert doc.text("field1") == "OK"
    assert doc.text("field2") == ""
    assert doc.elements["field2"].writes == 0


def test_update_document_coerces_values_to_text():
    doc = MemoryDocument(["peers", "bw"])
    update_document({"peers": 42, "bw": 1.5}, doc)
    assert doc.text("peers") == "42"
    assert doc.text("bw") == "1.5"


def test_update_document_missing_element_fails():
    doc = MemoryDocument(["a"])
    with pytest.raises(ElementNotFound):
        update_document({"a": "1", "missing": "2"}, doc)
    # writes before the failure are kept
    assert doc.text("a") == "1"


def test_element_not_found_is_a_key_error():
    with pytest.raises(KeyError):
        update_document({"x": 1}, MemoryDocument())


class FakePlaceholder:
    def __init__(self):
        self.calls = []

    def markdown(self, body, unsafe_allow_html=False):
        self.calls.append((body, unsafe_allow_html))


class FakeContainer:
    def __init__(self):
        self.created = []

    def empty(self):
        p = FakePlaceholder()
        self.created.append(p)
        return p


def test_streamlit_document_writes_markup_into_placeholders():
    container = FakeContainer()
    doc = StreamlitDocument.from_ids(["version", "uptime"], container)

    update_document({"version": "<b>2.5.0</b>"}, doc)

    version, uptime = container.created
    assert version.calls == [("<b>2.5.0</b>", True)]
    assert uptime.calls == []
    assert doc.get_element_by_id("nope") is None
