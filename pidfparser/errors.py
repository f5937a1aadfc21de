from lxml import etree


class MalformedDocument(Exception):
    """
    Raised when an element is asked to parse a tag that isn't its own, or
    when an attribute or text value can't be converted to its type.
    """


# Faults from the tokenizer are passed through exactly as lxml raises them
StreamFault = etree.XMLSyntaxError
