"""ContextObject decoding.

A ContextObject is a query-string style list of ``key=value`` pairs joined
by ``&`` with percent-encoded values. Decoding happens in two passes:

1. :func:`decode_fields` builds an ordered mapping in which a repeated key
   turns into a list of values, in encounter order.
2. :func:`decode_metadata` folds that mapping into a :class:`MetadataRecord`
   using plain assignment, so a later key overwrites an earlier one.
"""

import logging
from urllib.parse import unquote_to_bytes

from .errors import MalformedContextObject
from .models import DecodedFields, MetadataRecord

logger = logging.getLogger(__name__)

REFERENT_ID_KEY = "rft_id"
REFERENT_FORMAT_KEY = "rft_val_fmt"
REFERENT_PREFIX = "rft."


def urldecode(value: str) -> str:
    """Decode a form-encoded value.

    ``+`` becomes a space and ``%XX`` escapes are decoded as UTF-8. Invalid
    escapes such as ``%ZZ`` or a trailing ``%`` are kept literally, and so
    are escaped bytes that do not form valid UTF-8 (re-emitted as uppercase
    ``%XX``).
    """
    data = unquote_to_bytes(value.replace("+", " "))
    parts = []
    while data:
        try:
            parts.append(data.decode("utf-8"))
            break
        except UnicodeDecodeError as e:
            parts.append(data[:e.start].decode("utf-8"))
            parts.append("".join(f"%{byte:02X}" for byte in data[e.start:e.end]))
            data = data[e.end:]
    return "".join(parts)


def decode_fields(raw: str, strict: bool = True) -> DecodedFields:
    """Parse a ContextObject into urldecoded key-value pairs.

    Keys with multiple values are represented by a list. Keys are kept as
    they appear in ``raw``; only values are decoded.

    Args:
        raw: The encoded ContextObject.
        strict: If True, a pair without ``=`` raises
            :class:`MalformedContextObject`. If False, it is skipped.

    Returns:
        Ordered dict of key to value or list of values.
    """
    fields: DecodedFields = {}
    if not raw:
        return fields

    for pair in raw.split("&"):
        if not pair:
            continue
        key, sep, value = pair.partition("=")
        if not sep:
            if strict:
                raise MalformedContextObject(pair, raw)
            logger.warning("Skipping malformed ContextObject pair: %r", pair)
            continue

        value = urldecode(value)
        if key in fields:
            existing = fields[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                fields[key] = [existing, value]
        else:
            fields[key] = value
    return fields


def decode_metadata(raw: str, strict: bool = True) -> MetadataRecord:
    """Parse the referent metadata from a ContextObject.

    ``id`` is the referent id (usually a DOI or URL), ``format`` is the
    metadata format identifier and ``metadata`` holds the ``rft.*`` pairs
    with the prefix stripped.
    """
    record = MetadataRecord()
    for key, value in decode_fields(raw, strict=strict).items():
        if key == REFERENT_ID_KEY:
            record.id = value
        elif key == REFERENT_FORMAT_KEY:
            record.format = value
        elif key.startswith(REFERENT_PREFIX):
            record.metadata[key[len(REFERENT_PREFIX):]] = value
    return record
