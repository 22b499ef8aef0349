"""COinS collector: holds the ContextObjects found in one document."""

import logging
from collections.abc import Iterator
from pathlib import Path

import requests
from bs4 import Tag

from . import codec, document
from .models import DecodedFields, MetadataRecord
from .scanner import scan

logger = logging.getLogger(__name__)

OPENURL_VERSION = "Z39.88-2004"


class Collector:
    """Reads COinS spans from HTML and exposes them in several shapes.

    The ContextObjects themselves, OpenURLs, the decoded key-value pairs, or
    just the referent metadata.

    Each ``load*`` call replaces the stored ContextObjects. Instances are not
    internally synchronized; serialize loads against readers when sharing
    one across threads.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict
        self._context_objects: list[str] = []

    def load(self, doc: Tag) -> None:
        """Scan a parsed document for COinS spans."""
        self._context_objects = scan(doc)

    def load_string(self, markup: str | bytes, xml: bool = False) -> None:
        """Parse an HTML or XML string for COinS spans."""
        self.load(document.parse_string(markup, xml=xml))

    def load_file(self, path: str | Path, xml: bool = False) -> None:
        """Parse an HTML or XML file for COinS spans."""
        self.load(document.parse_file(path, xml=xml))

    def load_url(
        self,
        url: str,
        xml: bool = False,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Fetch a page and parse it for COinS spans."""
        markup = document.fetch_markup(url, session=session, timeout=timeout)
        self.load(document.parse_string(markup, xml=xml))

    def get_raw_context_objects(self) -> list[str]:
        """Return the ContextObject strings detected from the input."""
        return list(self._context_objects)

    def get_open_urls(self, base_url: str) -> list[str]:
        """Return an OpenURL for each COinS span, pointing at ``base_url``.

        ``base_url`` is used as given; no encoding or validation happens.
        """
        return [
            f"{base_url}?url_ver={OPENURL_VERSION}&{ctx}"
            for ctx in self._context_objects
        ]

    def get_decoded_fields(self) -> list[DecodedFields]:
        """Return the key-value pairs for each COinS span."""
        return [codec.decode_fields(ctx, strict=self.strict) for ctx in self._context_objects]

    def get_metadata_records(self) -> list[MetadataRecord]:
        """Return the referent metadata for each COinS span."""
        return [codec.decode_metadata(ctx, strict=self.strict) for ctx in self._context_objects]

    def __len__(self) -> int:
        return len(self._context_objects)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._context_objects))
