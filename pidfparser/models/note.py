from ..constants import XML_NAMESPACE
from .element import TextElement


class Note(TextElement):
    """
    A free text annotation, with an optional xml:lang attribute
    """

    ELEMENT_NAME = "note"
    STRIP_TEXT = False

    def __init__(self, text=None, lang=None):
        super().__init__(text)
        self.lang = lang

    def __repr__(self):
        return "<Note lang=%s text=%r>" % (self.lang, self.value)

    @property
    def text(self):
        return self.value

    @text.setter
    def text(self, value):
        self.value = value if value != "" else None

    def parse_attributes(self, tokens):
        self.lang = tokens.get_attribute(XML_NAMESPACE, "lang")

    def serialize_attributes(self, sink):
        if self.lang:
            sink.attribute(XML_NAMESPACE, "lang", self.lang)

    def _key(self):
        return (self.value, self.lang)
