"""coins-collector - COinS (ContextObjects in Spans) reader for HTML and XML pages."""

from .codec import decode_fields, decode_metadata
from .collector import Collector
from .config import Config
from .errors import CoinsError, MalformedContextObject, ParseError
from .models import MetadataRecord

__all__ = [
    "Collector",
    "Config",
    "MetadataRecord",
    "decode_fields",
    "decode_metadata",
    "CoinsError",
    "MalformedContextObject",
    "ParseError",
]
__version__ = "0.1.0"
