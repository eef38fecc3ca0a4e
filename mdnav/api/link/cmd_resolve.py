"""Link resolve API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkResolveOutput
from ..config.MdnavConfig import MdnavConfig
from ..path.get_platform_paths import get_platform_paths
from ..path.resolve_link_path import resolve_link_path
from ..path.RootTracker import RootTracker
from ..path.SessionRoots import SessionRoots
from ..Severity import Severity
from ..StageResult import StageResult
from ._build_perspective import _build_perspective
from .classify_link import classify_link
from .LinkKind import LinkKind
from .split_anchor import split_anchor


def cmd_resolve(
    link: str,
    document: str,
    perspective: str | None = None,
    root_tell: str | None = None,
    initial_dir: str | None = None,
) -> StageResult:
    """Resolve a link as if it were followed from ``document``.

    Args:
        link: Link target
        document: Path of the document containing the link
        perspective: Override for the configured perspective priority
        root_tell: Override for the configured root marker
        initial_dir: Directory of the first-opened file (defaults to the document's)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = MdnavConfig.load()
            active = _build_perspective(config.perspective, perspective, root_tell)
        except ValueError as e:
            result_obj.output = LinkResolveOutput(link=link, errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        paths = get_platform_paths()
        roots = SessionRoots(initial_dir=initial_dir)
        roots.remember_initial(document, paths)
        warnings: list[str] = []

        yield (0.4, "Locating project root...")
        notice = RootTracker(active, roots, platform_paths=paths).update_root(document)
        if notice is not None and notice.severity != Severity.INFO:
            warnings.append(notice.message)

        yield (0.7, "Resolving link...")
        classified = classify_link(link)
        path_part, anchor = classified.remainder, None
        if classified.kind == LinkKind.FILENAME:
            path_part, anchor = split_anchor(path_part)
        resolved = resolve_link_path(
            classified.kind,
            path_part,
            active,
            roots,
            document,
            anchor=anchor,
            implicit_extension=config.links.implicit_extension,
            platform_paths=paths,
        )

        yield (1.0, "Complete")
        result_obj.output = LinkResolveOutput(
            link=link,
            kind=classified.kind.value,
            resolved=resolved.path if resolved else None,
            anchor=resolved.anchor if resolved else None,
            shell=resolved.shell_quoted if resolved else None,
            root_dir=roots.root_dir,
            initial_dir=roots.initial_dir,
            warnings=warnings,
        ).model_dump(mode="python")
        if resolved is None:
            result_obj.result = f"{classified.kind.value} links are not resolved to a path"
        else:
            result_obj.result = f"Resolved to {resolved.path}"
        result_obj.success = True

    return StageResult(announce=f"Resolving {link!r} from {document}...", progress_callback=do_work)
