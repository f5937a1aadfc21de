import io
import enum
import logging
from collections import deque

from lxml import etree

from .config import app_config

# libxml2 errors reported when the data stops inside an open element
TRUNCATION_ERRORS = set(
    [
        "ERR_TAG_NOT_FINISHED",
        "ERR_LTSLASH_REQUIRED",
        "ERR_GT_REQUIRED",
        "ERR_DOCUMENT_END",
        "ERR_ATTRIBUTE_NOT_STARTED",
        "ERR_ATTRIBUTE_NOT_FINISHED",
        "ERR_ATTRIBUTE_WITHOUT_VALUE",
    ]
)


def is_truncation(exc):
    """
    True if every error behind an XMLSyntaxError comes from running out of
    data, rather than from bad syntax in the data that was read
    """
    errors = [
        entry
        for entry in (exc.error_log or [])
        if entry.level_name in ["ERROR", "FATAL"]
    ]
    if not errors:
        return False

    return all(entry.type_name in TRUNCATION_ERRORS for entry in errors)


class EventType(enum.Enum):
    """Kinds of events produced by a TokenSource"""

    START_DOCUMENT = 0
    START_TAG = 1
    TEXT = 2
    END_TAG = 3
    END_DOCUMENT = 4


class TokenSource:
    """
    A pull-style cursor over an XML document.

    lxml's XMLPullParser hands out ("start", element) and ("end", element)
    pairs. This class flattens those into a stream of START_TAG, TEXT and
    END_TAG events, one at a time, so that each model object can consume
    exactly its own subtree.

    Character data is reported once it is complete: the text ahead of a
    start tag is the parent's text (or the previous sibling's tail), and the
    text ahead of an end tag is the element's own text (or its last child's
    tail). Comments and processing instructions are dropped by the parser.

    If the data runs out while elements are still open, the document is
    treated as truncated and the cursor moves to END_DOCUMENT. Any other
    tokenizer failure is raised as lxml's XMLSyntaxError.

    @param default_namespace Namespace to report for unqualified tags
    """

    def __init__(
        self,
        source,
        chunk_size=None,
        resolve_entities=None,
        huge_tree=None,
        default_namespace=None,
    ):
        if isinstance(source, str):
            source = source.encode("utf-8")
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)

        if chunk_size is None:
            chunk_size = app_config.getint("parser", "chunk_size")
        if resolve_entities is None:
            resolve_entities = app_config.getboolean("parser", "resolve_entities")
        if huge_tree is None:
            huge_tree = app_config.getboolean("parser", "huge_tree")

        self.source = source
        self.default_namespace = default_namespace
        self.chunk_size = chunk_size
        self.parser = etree.XMLPullParser(
            events=("start", "end"),
            resolve_entities=resolve_entities,
            huge_tree=huge_tree,
            remove_comments=True,
            remove_pis=True,
        )

        # Events which have been parsed, but not yet handed out
        self.pending = deque()
        # Number of elements started, but not yet ended, by the parser
        self.open_tags = 0
        self.exhausted = False

        self.event_type = EventType.START_DOCUMENT
        self.elm = None
        self.text = None

        self.lgr = logging.getLogger(self.__class__.__name__)

    def __repr__(self):
        return "<TokenSource event=%s name=%s>" % (self.event_type.name, self.name)

    @property
    def namespace(self):
        """The namespace URI of the current tag"""
        if self.elm is None:
            return None
        return etree.QName(self.elm).namespace or self.default_namespace

    @property
    def name(self):
        """The local name of the current tag"""
        if self.elm is None:
            return None
        return etree.QName(self.elm).localname

    @property
    def line(self):
        """The source line of the current tag, if known"""
        if self.elm is None:
            return None
        return self.elm.sourceline

    def get_attribute(self, namespace, name):
        """
        Look up an attribute on the current start tag.

        @param namespace The attribute's namespace URI, or None if unqualified
        @param name      The attribute's local name
        @return The attribute value, or None if absent
        """
        if self.event_type is not EventType.START_TAG:
            return None

        if namespace:
            return self.elm.get("{%s}%s" % (namespace, name))
        return self.elm.get(name)

    def is_start_tag(self, namespace, name):
        return (
            self.event_type is EventType.START_TAG
            and self.namespace == namespace
            and self.name == name
        )

    def is_end_tag(self, namespace, name):
        return (
            self.event_type is EventType.END_TAG
            and self.namespace == namespace
            and self.name == name
        )

    def advance(self):
        """
        Move to the next event.

        @return The EventType of the new current event
        """
        if self.event_type is EventType.END_DOCUMENT:
            return self.event_type

        while not self.pending:
            if self.exhausted:
                self.event_type = EventType.END_DOCUMENT
                self.elm = None
                self.text = None
                return self.event_type

            self._read_chunk()

        (self.event_type, self.elm, self.text) = self.pending.popleft()
        return self.event_type

    def next_tag(self):
        """
        Advance past any character data to the next start or end tag.
        """
        event = self.advance()
        while event in [EventType.TEXT, EventType.START_DOCUMENT]:
            event = self.advance()

        return event

    def skip_subtree(self):
        """
        Skip the current element, including everything it contains. On return
        the cursor sits on the element's end tag, or at END_DOCUMENT if the
        data ran out first.
        """
        if self.event_type is not EventType.START_TAG:
            raise ValueError("skip_subtree() called on %s" % self.event_type.name)

        depth = 1
        while depth > 0:
            event = self.advance()
            if event is EventType.START_TAG:
                depth += 1
            elif event is EventType.END_TAG:
                depth -= 1
            elif event is EventType.END_DOCUMENT:
                break

        return self.event_type

    def _read_chunk(self):
        data = self.source.read(self.chunk_size)
        if not data:
            self._finish()
            return

        self.parser.feed(data)
        self._queue_events()

    def _finish(self):
        self.exhausted = True

        failure = None
        try:
            self.parser.close()
        except etree.XMLSyntaxError as exc:
            failure = exc

        self._queue_events()

        if failure is not None:
            if self.open_tags == 0 or not is_truncation(failure):
                raise failure

            self.lgr.debug(
                "Document truncated with %d open element(s): %s",
                self.open_tags,
                failure,
            )

    def _queue_events(self):
        for (action, elm) in self.parser.read_events():
            if action == "start":
                prev = elm.getprevious()
                if prev is not None:
                    text = prev.tail
                else:
                    parent = elm.getparent()
                    text = parent.text if parent is not None else None

                self._queue_text(text)
                self.pending.append((EventType.START_TAG, elm, None))
                self.open_tags += 1
            elif action == "end":
                if len(elm):
                    text = elm[-1].tail
                else:
                    text = elm.text

                self._queue_text(text)
                self.pending.append((EventType.END_TAG, elm, None))
                self.open_tags -= 1

    def _queue_text(self, text):
        if text:
            self.pending.append((EventType.TEXT, None, text))
