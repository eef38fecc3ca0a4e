"""Unit test fixtures: fake collaborators for the navigator."""

import pytest

from mdnav.api.Notice import Notice
from mdnav.api.Severity import Severity


class FakeHost:
    """EditorHost that records every call."""

    def __init__(self, document: str | None = None):
        self.document = document
        self.opened: list[str] = []
        self.headings: list[str] = []
        self.notices: list[tuple[str, Severity]] = []

    def current_document_path(self) -> str | None:
        return self.document

    def open_buffer(self, path: str) -> None:
        self.opened.append(path)
        self.document = path

    def notify(self, message: str, severity: Severity) -> None:
        self.notices.append((message, severity))

    def jump_to_heading(self, text: str) -> None:
        self.headings.append(text)


class FakeOpener:
    """Opener that records targets and optionally refuses them."""

    def __init__(self, refuse: Notice | None = None):
        self.opened: list[str] = []
        self.refuse = refuse

    def open(self, target: str) -> Notice | None:
        if self.refuse is not None:
            return self.refuse
        self.opened.append(target)
        return None


class FakeCitations:
    def __init__(self, entries: dict[str, str]):
        self.entries = entries
        self.requested: list[str] = []

    def resolve_citation_key(self, key: str) -> str | None:
        self.requested.append(key)
        return self.entries.get(key)


@pytest.fixture
def make_host():
    return FakeHost


@pytest.fixture
def make_opener():
    return FakeOpener


@pytest.fixture
def make_citations():
    return FakeCitations
