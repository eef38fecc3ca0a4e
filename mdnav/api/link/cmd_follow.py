"""Link follow API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkFollowOutput
from ..config.MdnavConfig import MdnavConfig
from ..nav.ConsoleHost import ConsoleHost
from ..nav.Navigator import Navigator
from ..nav.SystemOpener import SystemOpener
from ..path.SessionRoots import SessionRoots
from ..Severity import Severity
from ..StageResult import StageResult
from ._build_perspective import _build_perspective


def cmd_follow(
    link: str,
    document: str,
    perspective: str | None = None,
    root_tell: str | None = None,
    initial_dir: str | None = None,
) -> StageResult:
    """Follow a link from ``document``: open it in the editor or default application."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = MdnavConfig.load()
            active = _build_perspective(config.perspective, perspective, root_tell)
        except ValueError as e:
            result_obj.output = LinkFollowOutput(link=link, errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return
        config = config.model_copy(update={"perspective": active})

        opener = SystemOpener()
        host = ConsoleHost(document, opener)
        navigator = Navigator(config, host, opener=opener, roots=SessionRoots(initial_dir=initial_dir))

        yield (0.5, "Following link...")
        outcome = navigator.follow(link)

        # Silencing only hides notices from the host, never from the result
        reported = [*outcome.notices, *host.failures]
        errors = [n.message for n in reported if n.severity == Severity.ERROR]
        warnings = [n.message for n in reported if n.severity == Severity.WARNING]

        yield (1.0, "Complete")
        result_obj.output = LinkFollowOutput(
            link=link,
            kind=outcome.kind.value,
            action=outcome.action,
            target=outcome.target,
            anchor=outcome.anchor,
            errors=errors,
            warnings=warnings,
        ).model_dump(mode="python")
        result_obj.success = outcome.ok and not errors
        if result_obj.success:
            result_obj.result = f"{outcome.action}: {outcome.target or outcome.anchor}"
        else:
            result_obj.result = errors[0] if errors else f"Nothing to do for {link!r}"

    return StageResult(announce=f"Following {link!r}...", progress_callback=do_work)
