from datetime import timezone

from dateutil.parser import isoparse

from ..errors import MalformedDocument
from .element import ElementBase, TextElement
from .note import Note
from .status import Status


def utc_naive(value):
    """Convert an aware datetime to a naive one in UTC"""
    if value is not None and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class Contact(TextElement):
    """
    The URI a tuple can be reached at, with an optional priority between
    0 and 1
    """

    ELEMENT_NAME = "contact"

    def __init__(self, uri=None, priority=None):
        super().__init__(uri)
        self.priority = priority

    def __repr__(self):
        return "<Contact uri=%s priority=%s>" % (self.value, self.priority)

    @property
    def uri(self):
        return self.value

    def parse_attributes(self, tokens):
        priority = tokens.get_attribute(None, "priority")
        if priority is None:
            self.priority = None
            return

        try:
            self.priority = float(priority)
        except ValueError as exc:
            raise MalformedDocument("Invalid contact priority: %s" % priority) from exc

    def serialize_attributes(self, sink):
        if self.priority is not None:
            sink.attribute(None, "priority", repr(float(self.priority)))

    def _key(self):
        return (self.value, self.priority)


class Timestamp(TextElement):
    """
    A point in time, stored as a naive datetime in UTC. Aware datetimes are
    converted to UTC on construction.
    """

    ELEMENT_NAME = "timestamp"

    def __init__(self, value=None):
        super().__init__(value)
        self.value = utc_naive(self.value)

    def convert(self, text):
        try:
            value = isoparse(text)
        except (TypeError, ValueError) as exc:
            raise MalformedDocument("Invalid timestamp: %s" % text) from exc

        return utc_naive(value)

    def format(self):
        value = utc_naive(self.value)
        if value is None:
            return None

        # Milliseconds, unless that would lose precision
        timespec = "microseconds" if value.microsecond % 1000 else "milliseconds"
        return value.isoformat(timespec=timespec) + "Z"


class Tuple(ElementBase):
    """
    A single presence record: the status of one service or device.

    The children are always written in schema order, <status>, <contact>,
    <note>*, then <timestamp>.
    """

    ELEMENT_NAME = "tuple"

    def __init__(self, tuple_id=None, status=None, contact=None, timestamp=None):
        self.tuple_id = tuple_id
        self.status = status
        self.contact = contact
        self.timestamp = timestamp
        self.notes = []

    def __repr__(self):
        return '<Tuple id="%s" status=%s contact=%s>' % (
            self.tuple_id,
            self.status,
            self.contact,
        )

    def add_note(self, note):
        self.notes.append(note)

    def parse(self, tokens):
        self.check_start_tag(tokens)
        self.tuple_id = tokens.get_attribute(None, "id")
        self.parse_content(tokens)
        return self

    def parse_child(self, tokens):
        if tokens.is_start_tag(Status.NAMESPACE, Status.ELEMENT_NAME):
            self.status = Status.from_tokens(tokens)
        elif tokens.is_start_tag(Contact.NAMESPACE, Contact.ELEMENT_NAME):
            self.contact = Contact.from_tokens(tokens)
        elif tokens.is_start_tag(Note.NAMESPACE, Note.ELEMENT_NAME):
            self.add_note(Note.from_tokens(tokens))
        elif tokens.is_start_tag(Timestamp.NAMESPACE, Timestamp.ELEMENT_NAME):
            self.timestamp = Timestamp.from_tokens(tokens)
        else:
            super().parse_child(tokens)

    def serialize(self, sink):
        sink.start_tag(self.NAMESPACE, self.ELEMENT_NAME)
        if self.tuple_id is not None:
            sink.attribute(None, "id", self.tuple_id)

        for child in [self.status, self.contact, *self.notes, self.timestamp]:
            if child is not None:
                child.serialize(sink)

        sink.end_tag(self.NAMESPACE, self.ELEMENT_NAME)

    def _key(self):
        return (self.tuple_id, self.status, self.contact, self.notes, self.timestamp)
