"""Split a heading anchor off a link target."""


def split_anchor(raw: str) -> tuple[str, str | None]:
    """Split ``notes.md#Heading`` into ``("notes.md", "#Heading")``.

    Targets that start with ``#`` are pure anchors and are returned whole,
    as is anything without a ``#``. The anchor keeps its leading ``#``.
    """
    index = raw.find("#")
    if index <= 0:
        return raw, None
    path, anchor = raw[:index], raw[index:]
    if anchor == "#":
        return path, None
    return path, anchor
