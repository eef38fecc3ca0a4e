"""Editor host for terminal use."""

import logging
import os
import shlex
import subprocess

from ..Notice import Notice
from ..Severity import Severity
from .Opener import Opener

logger = logging.getLogger(__name__)


class ConsoleHost:
    """EditorHost backed by ``$VISUAL``/``$EDITOR`` and the system opener.

    ``notices`` holds everything passed to ``notify``. ``failures`` holds
    only the notices raised by the host itself while opening a buffer, so a
    command can report them whether or not navigator notices are silenced.
    """

    def __init__(self, document: str | None, opener: Opener, editor: str | None = None):
        self.document = document
        self.opener = opener
        self.editor = editor if editor is not None else os.environ.get("VISUAL") or os.environ.get("EDITOR")
        self.notices: list[Notice] = []
        self.failures: list[Notice] = []

    def current_document_path(self) -> str | None:
        return self.document

    def open_buffer(self, path: str) -> None:
        self.document = path
        if self.editor:
            argv = [*shlex.split(self.editor), os.path.expanduser(path)]
            logger.debug("Running editor %s", argv)
            try:
                subprocess.run(argv, check=False)
            except OSError as exc:
                self._fail(Notice(f"Could not start editor {self.editor!r}: {exc}", Severity.ERROR))
            return
        notice = self.opener.open(path)
        if notice is not None:
            self._fail(notice)

    def notify(self, message: str, severity: Severity) -> None:
        self.notices.append(Notice(message, severity))

    def jump_to_heading(self, text: str) -> None:
        # A terminal editor is opened at the top of the file
        logger.info("Heading requested: %s", text)

    def _fail(self, notice: Notice) -> None:
        self.failures.append(notice)
        self.notify(notice.message, notice.severity)
