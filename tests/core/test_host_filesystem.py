import base64
import os

import pytest

from export_browser.core.host import (
    Base64BridgeFileSystem,
    LocalFileSystem,
    normalize_binary_payload,
    resolve_filesystem_capability,
)

pytestmark = pytest.mark.asyncio


class TestLocalFileSystem:

    async def test_stat_reports_regular_file_and_mtime(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("hello")
        os.utime(path, ns=(100_000_000, 100_000_000))

        file_stat = await LocalFileSystem().stat(path)

        assert file_stat.is_file
        assert file_stat.modified_at_ms == 100
        assert file_stat.size_bytes == 5

    async def test_stat_directory_is_not_a_file(self, tmp_path):
        (tmp_path / "nested").mkdir()
        file_stat = await LocalFileSystem().stat(tmp_path / "nested")
        assert not file_stat.is_file

    async def test_read_text_keeps_line_endings(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"one\r\ntwo\n")

        assert await LocalFileSystem().read_text(path) == "one\r\ntwo\n"

    async def test_make_dirs_is_idempotent(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        filesystem = LocalFileSystem()

        await filesystem.make_dirs(target)
        await filesystem.make_dirs(target)

        assert await filesystem.is_dir(target)

    async def test_remove_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await LocalFileSystem().remove(tmp_path / "gone.txt")

    async def test_base64_bridge_returns_text_payload(self, tmp_path):
        path = tmp_path / "c.pdf"
        path.write_bytes(b"%PDF-1.7 data")

        payload = await Base64BridgeFileSystem().read_binary(path)

        assert isinstance(payload, str)
        assert base64.b64decode(payload) == b"%PDF-1.7 data"


class TestNormalizeBinaryPayload:

    async def test_bytes_and_base64_normalize_to_same_value(self):
        raw = bytes(range(256))
        encoded = base64.b64encode(raw).decode("ascii")

        assert normalize_binary_payload(raw) == raw
        assert normalize_binary_payload(encoded) == raw
        assert normalize_binary_payload(bytearray(raw)) == raw
        assert normalize_binary_payload(memoryview(raw)) == raw

    async def test_invalid_base64_raises_value_error(self):
        with pytest.raises(ValueError):
            normalize_binary_payload("not*base64!")

    async def test_unknown_payload_type_raises_type_error(self):
        with pytest.raises(TypeError):
            normalize_binary_payload(12345)


class TestResolveCapability:

    async def test_browser_runtime_has_no_capability(self):
        assert resolve_filesystem_capability("browser") is None

    async def test_desktop_runtime_uses_local_disk(self):
        assert isinstance(resolve_filesystem_capability("desktop"), LocalFileSystem)

    async def test_base64_transport(self):
        capability = resolve_filesystem_capability("desktop", "base64")
        assert isinstance(capability, Base64BridgeFileSystem)
