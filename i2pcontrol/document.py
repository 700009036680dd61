from typing import Any, Dict, Iterable, Mapping, Optional, Protocol


class ElementNotFound(KeyError):
    pass


class Element(Protocol):
    def set_html(self, html: str) -> None: ...


class Document(Protocol):
    def get_element_by_id(self, element_id: str) -> Optional[Element]: ...


class MemoryElement:
    def __init__(self, element_id: str, html: str = ""):
        self.id = element_id
        self.html = html
        self.writes = 0

    def set_html(self, html: str) -> None:
        self.html = html
        self.writes += 1


class MemoryDocument:
    """Plain in-process rendering surface: a fixed set of elements addressed by id."""

    def __init__(self, element_ids: Iterable[str] = ()):
        self.elements: Dict[str, MemoryElement] = {i: MemoryElement(i) for i in element_ids}

    def get_element_by_id(self, element_id: str) -> Optional[MemoryElement]:
        return self.elements.get(element_id)

    def text(self, element_id: str) -> str:
        return self.elements[element_id].html


class StreamlitElement:
    def __init__(self, placeholder: Any):
        self.placeholder = placeholder

    def set_html(self, html: str) -> None:
        self.placeholder.markdown(html, unsafe_allow_html=True)


class StreamlitDocument:
    """
    Elements backed by Streamlit placeholders (`st.empty()`), so a rerender replaces
    the slot content instead of appending below it.
    """

    def __init__(self, placeholders: Mapping[str, Any]):
        self.elements: Dict[str, StreamlitElement] = {
            i: StreamlitElement(p) for i, p in placeholders.items()
        }

    @classmethod
    def from_ids(cls, element_ids: Iterable[str], container: Any) -> "StreamlitDocument":
        # container: the streamlit module itself, a column or st.container()
        return cls({i: container.empty() for i in element_ids})

    def get_element_by_id(self, element_id: str) -> Optional[StreamlitElement]:
        return self.elements.get(element_id)


def update_document(values: Mapping[str, Any], document: Document) -> None:
    """
    Write each value, coerced to text, into the element carrying its key as id.
    Raises ElementNotFound on the first id the document does not have; earlier writes stay.
    """
    for element_id in values.keys():
        element = document.get_element_by_id(element_id)
        if element is None:
            raise ElementNotFound(element_id)
        element.set_html(str(values[element_id]))
