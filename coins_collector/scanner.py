"""COinS span detection."""

import logging

from bs4 import Tag

logger = logging.getLogger(__name__)

COINS_CLASS = "Z3988"
COINS_TAG = "span"
COINS_ATTRIBUTE = "title"


def scan(document: Tag) -> list[str]:
    """Return the ContextObject of every COinS span in ``document``.

    A span matches only when its whole ``class`` attribute equals ``Z3988``;
    ``class="Z3988 extra"`` is not a COinS span. A span without a ``title``
    yields an empty string.

    In XML documents a span in a default namespace (XHTML included) matches;
    a prefixed name such as ``h:span`` does not.

    Args:
        document: A BeautifulSoup document or any tag within one.

    Returns:
        Raw ContextObject strings in document order.
    """
    spans = document.find_all(_is_coins_span)
    titles = [span.get(COINS_ATTRIBUTE, "") for span in spans]
    logger.debug("Found %d COinS span(s)", len(titles))
    return titles


def _is_coins_span(tag: Tag) -> bool:
    if tag.name != COINS_TAG:
        return False
    return _class_value(tag) == COINS_CLASS


def _class_value(tag: Tag) -> str | None:
    """Return the class attribute as written.

    Soups built with bs4's default multi-valued attributes hold ``class`` as
    a token list; those are rejoined with single spaces.
    """
    value = tag.get("class")
    if isinstance(value, list):
        return " ".join(value)
    return value
