"""Link API domain: classification of link targets."""

from .ClassifiedLink import ClassifiedLink
from .classify_link import classify_link, link_kind
from .has_url import has_url
from .LinkKind import LinkKind
from .split_anchor import split_anchor
from .transform_link import transform_link

__all__ = [
    "ClassifiedLink",
    "LinkKind",
    "classify_link",
    "has_url",
    "link_kind",
    "split_anchor",
    "transform_link",
]
