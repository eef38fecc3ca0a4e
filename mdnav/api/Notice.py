"""User-visible notice dataclass."""

from dataclasses import dataclass

from .Severity import Severity


@dataclass(frozen=True)
class Notice:
    """A message for the user, shown by the host unless notices are silenced."""

    message: str
    severity: Severity = Severity.INFO
