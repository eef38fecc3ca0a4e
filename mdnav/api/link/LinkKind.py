"""Kinds of link target."""

from enum import Enum


class LinkKind(str, Enum):
    FILENAME = "filename"
    FILE = "file"
    URL = "url"
    ANCHOR = "anchor"
    CITATION = "citation"
