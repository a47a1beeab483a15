from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from typing import List, Optional, Sequence

from snipkeep.domain.interfaces.clipboard_interface import IClipboard
from snipkeep.errors import ClipboardError

logger = logging.getLogger(__name__)

# Tried in order when no explicit command is configured
CANDIDATE_COMMANDS: Sequence[Sequence[str]] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class SystemClipboard(IClipboard):
    """Copies text by piping it into the platform clipboard tool."""

    TIMEOUT_SECONDS = 5.0

    def __init__(self, command: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self._command: List[str] = shlex.split(command) if command else []
        self.timeout = timeout or self.TIMEOUT_SECONDS

    def resolve_command(self) -> List[str]:
        if self._command:
            return list(self._command)
        for candidate in CANDIDATE_COMMANDS:
            if shutil.which(candidate[0]):
                return list(candidate)
        raise ClipboardError("Couldn't copy to clipboard: no clipboard tool found")

    def copy(self, text: str) -> None:
        cmd = self.resolve_command()
        try:
            # Lone surrogates from undecodable files round-trip as their original bytes
            payload = text.encode("utf-8", errors="surrogateescape")
            result = subprocess.run(
                cmd,
                input=payload,
                capture_output=True,
                timeout=self.timeout,
            )
        except (subprocess.SubprocessError, OSError, UnicodeError) as exc:
            raise ClipboardError() from exc

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", "replace").strip()
            logger.warning("clipboard command %s failed: %s", cmd[0], stderr)
            raise ClipboardError()
