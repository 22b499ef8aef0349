"""Markup loading: strings, files and URLs into BeautifulSoup trees."""

import logging
from pathlib import Path

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from lxml import etree

from .errors import ParseError

logger = logging.getLogger(__name__)

HTML_PARSER = "lxml"
XML_PARSER = "xml"

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def parse_string(markup: str | bytes, xml: bool = False) -> BeautifulSoup:
    """Parse an HTML or XML string.

    ``class`` is kept as a single string so COinS spans can be matched on
    the exact attribute value.

    Args:
        markup: The document source.
        xml: Whether the input should be parsed as XML.

    Raises:
        ParseError: If the parser rejects the markup. XML must be
            well-formed; HTML is parsed leniently.
    """
    if xml:
        _check_well_formed(markup)
        features = XML_PARSER
    else:
        features = HTML_PARSER

    try:
        return BeautifulSoup(markup, features, multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        raise ParseError(f"Parser rejected markup: {e}") from e


def parse_file(path: str | Path, xml: bool = False) -> BeautifulSoup:
    """Parse an HTML or XML file. I/O errors propagate unchanged."""
    path = Path(path)
    logger.debug("Loading %s", path)
    return parse_string(path.read_bytes(), xml=xml)


def fetch_markup(
    url: str,
    session: requests.Session | None = None,
    timeout: float = 30.0,
) -> bytes:
    """Download a page for COinS scanning.

    Raises:
        requests.RequestException: On connection failures or HTTP errors.
    """
    http = session or requests
    logger.info("Fetching %s", url)
    resp = http.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    resp.raise_for_status()
    return resp.content


def _check_well_formed(markup: str | bytes) -> None:
    encoding = None
    if isinstance(markup, str):
        # lxml refuses str input that carries an encoding declaration;
        # the explicit encoding overrides whatever the declaration says
        markup = markup.encode("utf-8")
        encoding = "utf-8"
    if not markup.strip():
        raise ParseError("Empty XML document")
    parser = etree.XMLParser(resolve_entities=False, no_network=True, encoding=encoding)
    try:
        etree.fromstring(markup, parser)
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Malformed XML: {e}") from e
