"""Apply command-line overrides to the configured perspective."""

from ..config.Perspective import Perspective


def _build_perspective(base: Perspective, priority: str | None, root_tell: str | None) -> Perspective:
    """Return ``base`` with ``priority``/``root_tell`` overridden where given.

    Raises:
        ValueError: If the combination does not validate
    """
    if priority is None and root_tell is None:
        return base
    data = base.model_dump()
    if priority is not None:
        data["priority"] = priority
    if root_tell is not None:
        data["root_tell"] = root_tell
    return Perspective.model_validate(data)
