"""Classified link dataclass."""

from dataclasses import dataclass

from .LinkKind import LinkKind


@dataclass(frozen=True)
class ClassifiedLink:
    """A raw link target together with its kind.

    ``remainder`` is the part after the kind's prefix (``file:``, ``@``, ``#``);
    for URLs and plain filenames it is the raw string itself.
    """

    kind: LinkKind
    raw: str
    remainder: str
