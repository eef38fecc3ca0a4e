"""Link classification."""

import logging
from collections.abc import Callable

from .ClassifiedLink import ClassifiedLink
from .has_url import has_url
from .LinkKind import LinkKind

logger = logging.getLogger(__name__)

FILE_PREFIX = "file:"


def classify_link(raw: str, looks_like_url: Callable[[str], bool] = has_url) -> ClassifiedLink:
    """Classify a link target.

    Rules are checked in order, first match wins:

    1. ``file:`` prefix -> FILE (remainder is the embedded path)
    2. ``looks_like_url(raw)`` -> URL
    3. ``@`` prefix -> CITATION (remainder is the citation key)
    4. ``#`` prefix -> ANCHOR (remainder is the heading text)
    5. anything else -> FILENAME

    Args:
        raw: Link target as extracted from the document
        looks_like_url: URL predicate, ``has_url`` by default

    Returns:
        ClassifiedLink for ``raw``
    """
    if raw.startswith(FILE_PREFIX):
        result = ClassifiedLink(LinkKind.FILE, raw, raw[len(FILE_PREFIX) :])
    elif looks_like_url(raw):
        result = ClassifiedLink(LinkKind.URL, raw, raw)
    elif raw.startswith("@"):
        result = ClassifiedLink(LinkKind.CITATION, raw, raw[1:])
    elif raw.startswith("#"):
        result = ClassifiedLink(LinkKind.ANCHOR, raw, raw[1:])
    else:
        result = ClassifiedLink(LinkKind.FILENAME, raw, raw)

    logger.debug("Classified %r as %s", raw, result.kind.value)
    return result


def link_kind(raw: str, looks_like_url: Callable[[str], bool] = has_url) -> LinkKind:
    """Return only the kind of ``raw``."""
    return classify_link(raw, looks_like_url).kind
