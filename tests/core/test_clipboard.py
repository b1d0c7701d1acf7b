import os
import shutil

import pytest

from export_browser.core.exceptions import ClipboardFailedError
from export_browser.core.host import CommandLineClipboard
from export_browser.core.host.clipboard import clipboard_command_candidates

pytestmark = pytest.mark.asyncio

needs_posix_tools = pytest.mark.skipif(
    shutil.which("cat") is None or shutil.which("false") is None,
    reason="requires cat and false on PATH",
)


@needs_posix_tools
async def test_write_text_succeeds_with_working_tool():
    clipboard = CommandLineClipboard(candidates=[["cat"]])
    await clipboard.write_text("/home/me/Documents/NepaliWallet/a.txt")


@needs_posix_tools
async def test_falls_through_to_next_candidate():
    clipboard = CommandLineClipboard(candidates=[["false"], ["cat"]])
    await clipboard.write_text("/tmp/x")


@needs_posix_tools
async def test_failing_tool_raises_clipboard_error():
    clipboard = CommandLineClipboard(candidates=[["false"]])
    with pytest.raises(ClipboardFailedError, match="exit 1"):
        await clipboard.write_text("/tmp/x")


@pytest.mark.skipif(shutil.which("sh") is None, reason="requires sh on PATH")
async def test_hung_tool_is_killed_after_timeout(tmp_path):
    pid_file = tmp_path / "clipboard.pid"
    clipboard = CommandLineClipboard(
        candidates=[["sh", "-c", f"echo $$ > {pid_file}; exec sleep 30"]],
        timeout=0.5,
    )

    with pytest.raises(ClipboardFailedError, match="timed out"):
        await clipboard.write_text("/tmp/x")

    pid = int(pid_file.read_text().strip())
    with pytest.raises(ProcessLookupError):
        os.kill(pid, 0)


async def test_no_tool_available_raises():
    clipboard = CommandLineClipboard(candidates=[["no-such-clipboard-tool-xyz"]])
    with pytest.raises(ClipboardFailedError, match="no clipboard tool available"):
        await clipboard.write_text("/tmp/x")


async def test_empty_text_is_rejected():
    with pytest.raises(ClipboardFailedError):
        await CommandLineClipboard(candidates=[["cat"]]).write_text("")


async def test_platform_candidates_are_not_empty():
    assert clipboard_command_candidates()
