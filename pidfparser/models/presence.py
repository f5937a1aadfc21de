from ..constants import PIDF_NAMESPACE
from ..sink import XmlSink
from ..tokens import EventType, TokenSource
from ..util import ListView
from .element import ElementBase
from .note import Note
from .tuple import Tuple


class Presence(ElementBase):
    """
    The <presence> element, root of an "application/pidf+xml" document.

    It carries an "entity" attribute (the URI of the presentity), any number
    of <tuple> elements, any number of <note> elements, and possibly
    extension elements from other namespaces, which are skipped.
    """

    ELEMENT_NAME = "presence"

    def __init__(self, entity=None):
        self._entity = str(entity) if entity is not None else None
        self._tuples = []
        self._notes = []

    def __repr__(self):
        return '<Presence entity="%s" tuples=%d notes=%d>' % (
            self._entity,
            len(self._tuples),
            len(self._notes),
        )

    @property
    def entity(self):
        return self._entity

    def set_entity(self, entity):
        """Overwrite the entity, without any checks"""
        self._entity = entity

    def add_tuple(self, tup):
        self._tuples.append(tup)

    def get_tuple_list(self):
        return ListView(self._tuples)

    def add_note(self, note):
        self._notes.append(note)

    def get_note_list(self):
        return ListView(self._notes)

    @property
    def tuples(self):
        return self.get_tuple_list()

    @property
    def notes(self):
        return self.get_note_list()

    def serialize(self, sink):
        if self._entity is None:
            raise ValueError("Presence must have an entity")

        sink.start_tag(self.NAMESPACE, self.ELEMENT_NAME)
        sink.attribute(None, "entity", self._entity)

        for tup in self._tuples:
            tup.serialize(sink)

        for note in self._notes:
            note.serialize(sink)

        sink.end_tag(self.NAMESPACE, self.ELEMENT_NAME)

    def parse(self, tokens):
        self.check_start_tag(tokens)

        # A missing entity is not a parse error
        self._entity = tokens.get_attribute(None, "entity")
        self.parse_content(tokens)

        return self

    def parse_child(self, tokens):
        if tokens.is_start_tag(Tuple.NAMESPACE, Tuple.ELEMENT_NAME):
            child, add = Tuple(), self.add_tuple
        elif tokens.is_start_tag(Note.NAMESPACE, Note.ELEMENT_NAME):
            child, add = Note(), self.add_note
        else:
            super().parse_child(tokens)
            return

        child.parse(tokens)

        # Only keep children which were read through to their end tag
        if tokens.event_type is not EventType.END_DOCUMENT:
            add(child)

    @staticmethod
    def from_string(data, **kwargs):
        """
        Parse a complete document. Unqualified tags are read as PIDF tags.

        @param data   The document, as bytes or str
        @param kwargs Passed on to TokenSource
        """
        kwargs.setdefault("default_namespace", PIDF_NAMESPACE)
        tokens = TokenSource(data, **kwargs)
        tokens.next_tag()
        return Presence.from_tokens(tokens)

    @staticmethod
    def from_file(fp, **kwargs):
        """
        Parse a document from a binary file object
        """
        kwargs.setdefault("default_namespace", PIDF_NAMESPACE)
        tokens = TokenSource(fp, **kwargs)
        tokens.next_tag()
        return Presence.from_tokens(tokens)

    @property
    def as_element(self):
        """
        Returns the lxml element representation of the document
        """
        sink = XmlSink()
        self.serialize(sink)
        return sink.close()

    def to_string(self, **kwargs):
        """
        Serialize the document to bytes

        @param kwargs Passed on to XmlSink.tostring()
        """
        sink = XmlSink()
        self.serialize(sink)
        return sink.tostring(**kwargs)

    def _key(self):
        return (self._entity, self._tuples, self._notes)
