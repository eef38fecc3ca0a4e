"""Unit tests for mdnav.api.nav.Navigator."""

import pytest

from mdnav.api.config.MdnavConfig import MdnavConfig
from mdnav.api.config.Perspective import Perspective
from mdnav.api.link.LinkKind import LinkKind
from mdnav.api.nav.NavigationOutcome import (
    ACTION_CITATION,
    ACTION_JUMP_TO_HEADING,
    ACTION_NONE,
    ACTION_OPEN_BUFFER,
    ACTION_OPEN_EXTERNAL,
)
from mdnav.api.nav.Navigator import Navigator
from mdnav.api.Notice import Notice
from mdnav.api.path.get_platform_paths import get_platform_paths
from mdnav.api.Severity import Severity

MARKER = ".mdnav-root-marker"
POSIX = get_platform_paths("Linux")


@pytest.fixture
def host(make_host):
    return make_host("/proj/notes/x.md")


@pytest.fixture
def opener(make_opener):
    return make_opener()


def _navigator(host, opener, citations=None, **config_kwargs):
    config_kwargs.setdefault("create_dirs", False)
    config = MdnavConfig(**config_kwargs)
    return Navigator(config, host, opener=opener, citations=citations, platform_paths=POSIX)


class TestFilenameLinks:
    def test_opens_sibling_with_implicit_extension(self, host, opener):
        outcome = _navigator(host, opener).follow("y")

        assert host.opened == ["/proj/notes/y.md"]
        assert outcome.kind == LinkKind.FILENAME
        assert outcome.action == ACTION_OPEN_BUFFER
        assert outcome.target == "/proj/notes/y.md"
        assert outcome.ok
        assert opener.opened == []

    def test_anchor_suffix_jumps_to_heading(self, host, opener):
        outcome = _navigator(host, opener).follow("y#Intro")

        assert host.opened == ["/proj/notes/y.md"]
        assert host.headings == ["Intro"]
        assert outcome.anchor == "#Intro"

    def test_explicit_anchor(self, host, opener):
        _navigator(host, opener).follow("y", anchor="#Other")
        assert host.headings == ["Other"]

    def test_link_transform_is_applied_first(self, host, opener):
        config = MdnavConfig(create_dirs=False)
        navigator = Navigator(
            config, host, opener=opener, link_transform=lambda s: s.replace(" ", "-"), platform_paths=POSIX
        )
        navigator.follow("My Page")
        assert host.opened == ["/proj/notes/My-Page.md"]

    def test_configured_implicit_extension(self, host, opener):
        _navigator(host, opener, links={"implicit_extension": "markdown"}).follow("y")
        assert host.opened == ["/proj/notes/y.markdown"]

    def test_first_perspective_uses_first_document(self, host, opener):
        navigator = _navigator(host, opener, perspective=Perspective(priority="first"))
        navigator.follow("sub/second")
        navigator.follow("third")
        assert host.opened == ["/proj/notes/sub/second.md", "/proj/notes/third.md"]

    def test_current_perspective_follows_the_active_document(self, host, opener):
        navigator = _navigator(host, opener)
        navigator.follow("sub/second")
        navigator.follow("third")
        assert host.opened == ["/proj/notes/sub/second.md", "/proj/notes/sub/third.md"]

    def test_missing_parent_directory_is_created(self, tmp_path, make_host, opener):
        host = make_host(str(tmp_path / "x.md"))
        _navigator(host, opener, create_dirs=True).follow("sub/dir/page")

        assert (tmp_path / "sub" / "dir").is_dir()
        assert host.opened == [str(tmp_path / "sub" / "dir" / "page.md")]

    def test_parent_directory_left_alone_when_disabled(self, tmp_path, make_host, opener):
        host = make_host(str(tmp_path / "x.md"))
        _navigator(host, opener, create_dirs=False).follow("sub/page")
        assert not (tmp_path / "sub").exists()


class TestRootPerspective:
    @pytest.fixture
    def project(self, tmp_path):
        proj = tmp_path / "proj"
        (proj / "notes").mkdir(parents=True)
        (proj / MARKER).touch()
        (tmp_path / "elsewhere").mkdir()
        return proj

    def _root_navigator(self, host, opener):
        perspective = Perspective(priority="root", fallback="first", root_tell=MARKER)
        return _navigator(host, opener, perspective=perspective)

    def test_update_root_notifies_host(self, project, make_host, opener):
        host = make_host(str(project / "notes" / "x.md"))
        notice = self._root_navigator(host, opener).update_root()

        assert notice.severity == Severity.INFO
        assert host.notices == [(f"Switched roots: {project}", Severity.INFO)]

    def test_relative_links_resolve_against_root(self, project, make_host, opener):
        host = make_host(str(project / "notes" / "x.md"))
        navigator = self._root_navigator(host, opener)
        navigator.update_root()

        navigator.follow("a/b")
        assert host.opened == [str(project / "a" / "b.md")]

    def test_first_follow_discovers_root(self, project, make_host, opener):
        host = make_host(str(project / "notes" / "x.md"))

        outcome = self._root_navigator(host, opener).follow("a/b")

        assert host.opened == [str(project / "a" / "b.md")]
        assert [n.message for n in outcome.notices] == [f"Switched roots: {project}"]

    def test_first_follow_outside_any_root_warns_once(self, project, tmp_path, make_host, opener):
        host = make_host(str(tmp_path / "elsewhere" / "x.md"))
        navigator = self._root_navigator(host, opener)

        first = navigator.follow("#Top")
        second = navigator.follow("#Top")

        assert [n.severity for n in first.notices] == [Severity.WARNING]
        assert second.notices == []
        assert navigator.roots.fallback_active

    def test_leaving_root_warns_once(self, project, tmp_path, make_host, opener):
        host = make_host(str(project / "notes" / "x.md"))
        navigator = self._root_navigator(host, opener)
        navigator.update_root()

        outside = str(tmp_path / "elsewhere" / "y.md")
        first = navigator.follow(outside)
        second = navigator.follow(outside)

        assert [n.severity for n in first.notices] == [Severity.WARNING]
        assert "Fallback perspective: first" in first.notices[0].message
        assert first.ok
        assert second.notices == []
        assert navigator.roots.root_dir is None


class TestOtherKinds:
    def test_anchor_link(self, host, opener):
        outcome = _navigator(host, opener).follow("#Section Two")

        assert outcome.kind == LinkKind.ANCHOR
        assert outcome.action == ACTION_JUMP_TO_HEADING
        assert host.headings == ["Section Two"]
        assert host.opened == []

    def test_url_goes_to_opener(self, host, opener):
        outcome = _navigator(host, opener).follow("https://example.com/page")

        assert outcome.kind == LinkKind.URL
        assert outcome.action == ACTION_OPEN_EXTERNAL
        assert opener.opened == ["https://example.com/page"]
        assert host.opened == []

    def test_custom_url_predicate(self, host, opener):
        config = MdnavConfig(create_dirs=False)
        navigator = Navigator(
            config, host, opener=opener, looks_like_url=lambda s: s.startswith("gh:"), platform_paths=POSIX
        )
        outcome = navigator.follow("gh:owner/repo")
        assert outcome.kind == LinkKind.URL
        assert opener.opened == ["gh:owner/repo"]

    def test_refused_open_is_reported(self, host, make_opener):
        refusal = Notice("Function unavailable for Plan9. Please file an issue.", Severity.ERROR)
        outcome = _navigator(host, make_opener(refuse=refusal)).follow("https://example.com")

        assert outcome.action == ACTION_NONE
        assert outcome.notices == [refusal]
        assert not outcome.ok
        assert host.notices == [(refusal.message, Severity.ERROR)]

    def test_existing_external_file_is_opened(self, tmp_path, make_host, opener):
        (tmp_path / "report.pdf").write_bytes(b"%PDF")
        host = make_host(str(tmp_path / "x.md"))

        outcome = _navigator(host, opener).follow("file:report.pdf")

        assert outcome.kind == LinkKind.FILE
        assert outcome.action == ACTION_OPEN_EXTERNAL
        assert opener.opened == [str(tmp_path / "report.pdf")]

    def test_existing_external_directory_is_opened(self, tmp_path, make_host, opener):
        (tmp_path / "assets").mkdir()
        host = make_host(str(tmp_path / "x.md"))
        _navigator(host, opener).follow("file:assets")
        assert opener.opened == [str(tmp_path / "assets")]

    def test_missing_external_file(self, tmp_path, make_host, opener):
        host = make_host(str(tmp_path / "x.md"))
        target = str(tmp_path / "missing.pdf")

        outcome = _navigator(host, opener).follow("file:missing.pdf")

        assert opener.opened == []
        assert not outcome.ok
        assert host.notices == [(f"{target} doesn't seem to exist!", Severity.ERROR)]

    def test_silent_suppresses_host_notices(self, tmp_path, make_host, opener):
        host = make_host(str(tmp_path / "x.md"))
        outcome = _navigator(host, opener, silent=True).follow("file:missing.pdf")

        assert host.notices == []
        assert [n.severity for n in outcome.notices] == [Severity.ERROR]


class TestCitations:
    def test_citation_to_url(self, host, opener, make_citations):
        citations = make_citations({"smith2020": "https://doi.org/10.1000/xyz"})
        outcome = _navigator(host, opener, citations).follow("@smith2020")

        assert citations.requested == ["smith2020"]
        assert outcome.kind == LinkKind.CITATION
        assert outcome.action == ACTION_CITATION
        assert outcome.target == "https://doi.org/10.1000/xyz"
        assert opener.opened == ["https://doi.org/10.1000/xyz"]

    def test_citation_to_missing_file(self, tmp_path, make_host, opener, make_citations):
        host = make_host(str(tmp_path / "x.md"))
        citations = make_citations({"doe": "file:papers/doe.pdf"})

        outcome = _navigator(host, opener, citations).follow("@doe")

        assert outcome.action == ACTION_NONE
        assert not outcome.ok
        assert "doesn't seem to exist!" in outcome.notices[0].message

    def test_unknown_key_warns(self, host, opener, make_citations):
        outcome = _navigator(host, opener, make_citations({})).follow("@nobody")

        assert outcome.action == ACTION_NONE
        assert [n.severity for n in outcome.notices] == [Severity.WARNING]
        assert "@nobody" in outcome.notices[0].message

    def test_without_bibliography_warns(self, host, opener):
        outcome = _navigator(host, opener).follow("@smith2020")
        assert [n.severity for n in outcome.notices] == [Severity.WARNING]
        assert opener.opened == []

    def test_citation_pointing_at_citation_is_not_followed(self, host, opener, make_citations):
        citations = make_citations({"a": "@b", "b": "https://example.com"})
        outcome = _navigator(host, opener, citations).follow("@a")

        assert citations.requested == ["a"]
        assert outcome.action == ACTION_NONE
        assert opener.opened == []
        assert outcome.notices[0].severity == Severity.WARNING
