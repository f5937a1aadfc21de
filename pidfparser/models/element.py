import logging

from ..constants import PIDF_NAMESPACE
from ..errors import MalformedDocument
from ..tokens import EventType


class ElementBase:
    """
    Common parse / serialize protocol for every PIDF element.

    Subclasses set NAMESPACE and ELEMENT_NAME, and implement parse() and
    serialize(). parse() is entered with the token source sitting on the
    element's start tag, and returns with it sitting on the matching end tag
    (or at END_DOCUMENT, if the document was cut short).
    """

    NAMESPACE = PIDF_NAMESPACE
    ELEMENT_NAME = None

    @property
    def namespace(self):
        return self.NAMESPACE

    @property
    def element_name(self):
        return self.ELEMENT_NAME

    def verify_parsing_element(self, namespace, name):
        return self.NAMESPACE == namespace and self.ELEMENT_NAME == name

    def check_start_tag(self, tokens):
        """
        Raise MalformedDocument unless the token source is on our start tag
        """
        if tokens.event_type is not EventType.START_TAG or not self.verify_parsing_element(
            tokens.namespace, tokens.name
        ):
            raise MalformedDocument(
                "Incorrect element: %s, %s (line %s)"
                % (tokens.namespace, tokens.name, tokens.line)
            )

    def parse(self, tokens):
        raise NotImplementedError()

    def serialize(self, sink):
        raise NotImplementedError()

    @classmethod
    def from_tokens(cls, tokens):
        """
        Build an element from a token source positioned on its start tag
        """
        ret = cls()
        ret.parse(tokens)
        return ret

    def parse_content(self, tokens):
        """
        Walk the events between our start tag and our end tag, handing
        character data to parse_text() and child elements to parse_child().

        @return False if the document ended before our end tag
        """
        event = tokens.advance()
        while not tokens.is_end_tag(self.NAMESPACE, self.ELEMENT_NAME):
            if event is EventType.END_DOCUMENT:
                return False
            if event is EventType.START_TAG:
                self.parse_child(tokens)
            elif event is EventType.TEXT:
                self.parse_text(tokens.text)

            event = tokens.advance()

        return True

    def parse_child(self, tokens):
        """
        Called with the token source on a child's start tag. Must leave it on
        that child's end tag. By default, the whole child is skipped.
        """
        logging.getLogger(self.__class__.__name__).debug(
            "Skipping extension element {%s}%s", tokens.namespace, tokens.name
        )
        tokens.skip_subtree()

    def parse_text(self, text):
        pass

    def _key(self):
        """Values which make up the structural identity of the element"""
        return ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()


class TextElement(ElementBase):
    """
    An element whose content is a single string of character data, such as
    <basic> or <note>.
    """

    # Strip surrounding whitespace from the parsed value
    STRIP_TEXT = True

    def __init__(self, value=None):
        # Empty text and no text serialize the same way
        self.value = value if value != "" else None

    def __repr__(self):
        return "<%s value=%r>" % (self.__class__.__name__, self.value)

    def parse(self, tokens):
        self.check_start_tag(tokens)
        self.parse_attributes(tokens)

        self._chunks = []
        complete = self.parse_content(tokens)
        text = "".join(self._chunks)

        # A cut-off value is discarded along with the element by the parent
        if not complete:
            return self

        if self.STRIP_TEXT:
            text = text.strip()
        self.value = self.convert(text) if text else None

        return self

    def parse_text(self, text):
        self._chunks.append(text)

    def parse_attributes(self, tokens):
        pass

    def serialize_attributes(self, sink):
        pass

    def convert(self, text):
        """Turn parsed text into the stored value"""
        return text

    def format(self):
        """Turn the stored value into text for serialization"""
        return self.value

    def serialize(self, sink):
        sink.start_tag(self.NAMESPACE, self.ELEMENT_NAME)
        self.serialize_attributes(sink)

        text = self.format()
        if text:
            sink.text(text)

        sink.end_tag(self.NAMESPACE, self.ELEMENT_NAME)

    def _key(self):
        return (self.value,)
