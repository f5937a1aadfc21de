from ..errors import MalformedDocument
from .element import ElementBase, TextElement
from .presence import Presence
from .tuple import Tuple, Contact, Timestamp
from .status import Status, Basic
from .note import Note

__all__ = [
    "MalformedDocument",
    "ElementBase",
    "TextElement",
    "Presence",
    "Tuple",
    "Contact",
    "Timestamp",
    "Status",
    "Basic",
    "Note",
]
