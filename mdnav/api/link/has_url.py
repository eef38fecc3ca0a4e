"""Decide whether a link target looks like a URL."""

import re

from ...constants import BARE_URL_TLDS

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_WWW = re.compile(r"^www\.", re.I)
_MAILTO = re.compile(r"^mailto:", re.I)
_BARE_DOMAIN = re.compile(
    r"^(?:[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?\.)+(?P<tld>[A-Za-z]{2,6})(?::\d+)?(?:[/?#]\S*)?$"
)


def has_url(text: str) -> bool:
    """Return True if ``text`` looks like a web address.

    Accepts ``scheme://`` prefixes, ``www.`` prefixes, ``mailto:`` and bare
    ``domain.tld[/path]`` forms whose TLD is a well-known domain suffix.
    """
    text = text.strip()
    if not text:
        return False
    if _SCHEME.match(text) or _WWW.match(text) or _MAILTO.match(text):
        return True
    m = _BARE_DOMAIN.match(text)
    return bool(m) and m.group("tld").lower() in BARE_URL_TLDS
