from .element import ElementBase, TextElement

OPEN = "open"
CLOSED = "closed"


class Basic(TextElement):
    """
    The basic status of a tuple, either "open" or "closed"

    Other values are kept as they are found; the parser doesn't enforce the
    schema's enumeration.
    """

    ELEMENT_NAME = "basic"

    @property
    def is_open(self):
        return self.value == OPEN


class Status(ElementBase):
    """
    The <status> element of a tuple. Only <basic> is understood, anything
    else inside is an extension and skipped.
    """

    ELEMENT_NAME = "status"

    def __init__(self, basic=None):
        if isinstance(basic, str):
            basic = Basic(basic)
        self.basic = basic

    def __repr__(self):
        return "<Status basic=%s>" % (self.basic.value if self.basic else None)

    def parse(self, tokens):
        self.check_start_tag(tokens)
        self.parse_content(tokens)
        return self

    def parse_child(self, tokens):
        if tokens.is_start_tag(Basic.NAMESPACE, Basic.ELEMENT_NAME):
            self.basic = Basic.from_tokens(tokens)
        else:
            super().parse_child(tokens)

    def serialize(self, sink):
        sink.start_tag(self.NAMESPACE, self.ELEMENT_NAME)
        if self.basic is not None:
            self.basic.serialize(sink)
        sink.end_tag(self.NAMESPACE, self.ELEMENT_NAME)

    def _key(self):
        return (self.basic,)
