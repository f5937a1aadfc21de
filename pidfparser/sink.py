from lxml import etree

from .config import app_config
from .constants import PIDF_NAMESPACE


def qualify(namespace, name):
    """Build an lxml "{namespace}name" tag"""
    if namespace:
        return "{%s}%s" % (namespace, name)
    return name


class XmlSink:
    """
    A write-only target for model objects to serialize themselves into.

    The calls mirror a streaming XML writer: start_tag(), then any number of
    attribute() calls, then text() and nested tags, then end_tag(). Since
    lxml's TreeBuilder wants all attributes up front, the start tag is held
    back until the first call that isn't attribute().
    """

    def __init__(self, nsmap=None):
        self.nsmap = nsmap if nsmap is not None else {None: PIDF_NAMESPACE}
        self.builder = etree.TreeBuilder()
        self.stack = []
        self.pending = None
        self.root = None

    def __repr__(self):
        return "<XmlSink depth=%d>" % len(self.stack)

    def start_tag(self, namespace, name):
        if self.root is not None:
            raise ValueError("Document already has a root element")

        self._flush()
        self.pending = (qualify(namespace, name), {})

    def attribute(self, namespace, name, value):
        if self.pending is None:
            raise ValueError("attribute() must directly follow start_tag()")

        self.pending[1][qualify(namespace, name)] = value

    def text(self, value):
        self._flush()
        if not self.stack:
            raise ValueError("text() outside of an element")

        self.builder.data(value)

    def end_tag(self, namespace, name):
        self._flush()

        tag = qualify(namespace, name)
        if not self.stack or self.stack[-1] != tag:
            raise ValueError(
                "end_tag(%s) does not match %s"
                % (tag, self.stack[-1] if self.stack else "nothing")
            )

        self.stack.pop()
        self.builder.end(tag)

        if not self.stack:
            self.root = self.builder.close()

    def close(self):
        """
        Returns the root element of the document that was written
        """
        if self.root is None:
            raise ValueError("Document is incomplete")

        return self.root

    def tostring(self, pretty_print=None, xml_declaration=None, encoding=None):
        if pretty_print is None:
            pretty_print = app_config.getboolean("serializer", "pretty_print")
        if xml_declaration is None:
            xml_declaration = app_config.getboolean("serializer", "xml_declaration")
        if encoding is None:
            encoding = app_config.get("serializer", "encoding")

        return etree.tostring(
            self.close(),
            pretty_print=pretty_print,
            xml_declaration=xml_declaration,
            encoding=encoding,
        )

    def _flush(self):
        if self.pending is None:
            return

        (tag, attrib) = self.pending
        self.pending = None

        if self.stack:
            self.builder.start(tag, attrib)
        else:
            self.builder.start(tag, attrib, self.nsmap)
        self.stack.append(tag)
