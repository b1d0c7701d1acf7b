import asyncio
import logging
import os
import shutil
import sys
from typing import List, Optional, Protocol

from export_browser.core.exceptions import ClipboardFailedError


class ClipboardCapability(Protocol):
    async def write_text(self, text: str) -> None: ...


def clipboard_command_candidates() -> List[List[str]]:
    """Clipboard commands to try for the current platform, in preference order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


class CommandLineClipboard:
    """Writes to the system clipboard by piping text into a platform clipboard tool."""

    def __init__(self, candidates: Optional[List[List[str]]] = None, timeout: float = 2.0):
        self._candidates = candidates if candidates is not None else clipboard_command_candidates()
        self._timeout = timeout

    async def write_text(self, text: str) -> None:
        if not text:
            raise ClipboardFailedError("nothing to copy")

        errors = []
        for command in self._candidates:
            if shutil.which(command[0]) is None:
                continue
            try:
                proc = await asyncio.create_subprocess_exec(
                    *command,
                    stdin=asyncio.subprocess.PIPE,
                    stdout=asyncio.subprocess.DEVNULL,
                    stderr=asyncio.subprocess.PIPE,
                )
            except OSError as e:
                errors.append(f"{command[0]}: {e}")
                continue

            try:
                _, stderr = await asyncio.wait_for(
                    proc.communicate(text.encode("utf-8")), timeout=self._timeout
                )
            except asyncio.TimeoutError:
                await self._kill(proc)
                errors.append(f"{command[0]}: timed out after {self._timeout}s")
                continue
            except OSError as e:
                await self._kill(proc)
                errors.append(f"{command[0]}: {e}")
                continue

            if proc.returncode == 0:
                logging.debug(f"Copied {len(text)} characters via {command[0]}")
                return
            errors.append(f"{command[0]}: exit {proc.returncode} {stderr.decode(errors='replace').strip()}")

        if not errors:
            raise ClipboardFailedError("no clipboard tool available")
        raise ClipboardFailedError("; ".join(errors))

    @staticmethod
    async def _kill(proc: asyncio.subprocess.Process) -> None:
        """Terminate a clipboard tool that did not finish and reap it."""
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                pass  # exited on its own
        await proc.wait()
        logging.warning(f"Clipboard tool (pid {proc.pid}) killed after failing to finish")
