"""Link classify API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkClassifyOutput
from ..StageResult import StageResult
from .classify_link import classify_link
from .LinkKind import LinkKind
from .split_anchor import split_anchor


def cmd_classify(link: str) -> StageResult:
    """Report the kind of a link target without touching the filesystem."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Classifying link...")
        classified = classify_link(link)

        path = None
        anchor = None
        if classified.kind == LinkKind.FILENAME:
            path, anchor = split_anchor(classified.remainder)

        yield (1.0, "Complete")
        result_obj.output = LinkClassifyOutput(
            link=link,
            kind=classified.kind.value,
            remainder=classified.remainder,
            path=path,
            anchor=anchor,
        ).model_dump(mode="python")
        result_obj.result = f"{link!r} is a {classified.kind.value} link"
        result_obj.success = True

    return StageResult(announce=f"Classifying {link!r}...", progress_callback=do_work)
