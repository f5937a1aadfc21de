from importlib.metadata import version, PackageNotFoundError

from .constants import PIDF_NAMESPACE, CONTENT_TYPE
from .errors import MalformedDocument, StreamFault
from .tokens import EventType, TokenSource
from .sink import XmlSink
from .models import Presence, Tuple, Status, Basic, Contact, Note, Timestamp

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = "unknown"
