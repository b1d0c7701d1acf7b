"""
End-to-end tests of the host bridge API with a real export folder.
"""

import os
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from export_browser import dependencies
from export_browser.main import app


def _configure(monkeypatch, tmp_path, host_runtime):
    monkeypatch.setenv("DOCUMENTS_ROOT", str(tmp_path / "Documents"))
    monkeypatch.setenv("HOST_RUNTIME", host_runtime)
    monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "logs" / "export_browser.log"))
    dependencies.reset_singletons()


def _write(path, content, mtime_ms):
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    os.utime(path, ns=(mtime_ms * 1_000_000, mtime_ms * 1_000_000))


@pytest.fixture
def export_folder(tmp_path):
    folder = tmp_path / "Documents" / "NepaliWallet"
    folder.mkdir(parents=True)
    _write(folder / "a.txt", "hello", 1_000)
    _write(folder / "b.csv", "name,amount\nrent,100\nfood,20", 3_000)
    _write(folder / "c.pdf", b"%PDF-1.4 test", 2_000)
    return folder


@pytest.fixture
def clipboard():
    return AsyncMock()


@pytest.fixture
def client(monkeypatch, tmp_path, export_folder, clipboard):
    _configure(monkeypatch, tmp_path, "desktop")
    dependencies._singletons["clipboard"] = clipboard
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def browser_client(monkeypatch, tmp_path):
    _configure(monkeypatch, tmp_path, "browser")
    with TestClient(app) as test_client:
        yield test_client


class TestCatalogEndpoints:

    def test_catalog_is_loaded_at_startup_newest_first(self, client):
        response = client.get("/api/exports")

        assert response.status_code == 200
        data = response.json()
        assert data["host_available"] is True
        assert [entry["name"] for entry in data["entries"]] == ["b.csv", "c.pdf", "a.txt"]
        assert data["entries"][0]["modified_at"] == 3_000
        assert data["total_files"] == 3
        assert data["message"] is None

    def test_refresh_picks_up_new_files(self, client, export_folder):
        _write(export_folder / "d.txt", "new", 4_000)

        response = client.post("/api/exports/refresh")

        assert response.status_code == 200
        assert response.json()["entries"][0]["name"] == "d.txt"

    def test_empty_folder_message(self, client, export_folder):
        for path in export_folder.iterdir():
            path.unlink()

        data = client.post("/api/exports/refresh").json()

        assert data["entries"] == []
        assert data["message"] == "No exported files found"

    def test_catalog_info(self, client):
        info = client.get("/api/exports/info").json()

        assert info["service"] == "FileCatalogService"
        assert info["host_available"] is True
        assert info["committed_generation"] >= 1


class TestPreviewEndpoints:

    def test_text_preview(self, client):
        data = client.get("/api/exports/a.txt/preview").json()

        assert data["kind"] == "text"
        assert data["content"] == "hello"

    def test_tabular_preview(self, client):
        data = client.get("/api/exports/b.csv/preview").json()

        assert data["kind"] == "tabular"
        assert data["columns"] == ["name", "amount"]
        assert data["rows"] == [
            {"name": "rent", "amount": "100"},
            {"name": "food", "amount": "20"},
        ]

    def test_binary_preview_serves_resource_until_closed(self, client):
        data = client.get("/api/exports/c.pdf/preview").json()

        assert data["kind"] == "binary_resource"
        handle = data["handle"]
        assert handle["media_type"] == "application/pdf"

        resource = client.get(handle["url"])
        assert resource.status_code == 200
        assert resource.content == b"%PDF-1.4 test"
        assert resource.headers["content-type"] == "application/pdf"

        assert client.delete("/api/preview").status_code == 200
        assert client.get("/api/preview").json() is None
        assert client.get(handle["url"]).status_code == 404

    def test_opening_another_file_releases_resource(self, client):
        url = client.get("/api/exports/c.pdf/preview").json()["handle"]["url"]

        client.get("/api/exports/a.txt/preview")

        assert client.get(url).status_code == 404
        assert client.get("/api/preview").json()["file_name"] == "a.txt"

    def test_unknown_name_is_404(self, client):
        assert client.get("/api/exports/nope.txt/preview").status_code == 404

    def test_file_removed_behind_our_back_is_unsupported(self, client, export_folder):
        (export_folder / "a.txt").unlink()

        data = client.get("/api/exports/a.txt/preview").json()

        assert data["kind"] == "unsupported"


class TestFileOpsEndpoints:

    def test_delete_removes_from_disk_and_catalog(self, client, export_folder):
        response = client.delete("/api/exports/a.txt")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert not (export_folder / "a.txt").exists()
        names = [entry["name"] for entry in client.get("/api/exports").json()["entries"]]
        assert names == ["b.csv", "c.pdf"]

    def test_delete_unknown_name_is_404(self, client):
        assert client.delete("/api/exports/nope.txt").status_code == 404

    def test_failed_delete_keeps_catalog(self, client, export_folder):
        (export_folder / "a.txt").unlink()

        response = client.delete("/api/exports/a.txt")

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert len(client.get("/api/exports").json()["entries"]) == 3

    def test_resolve_path(self, client, export_folder):
        data = client.get("/api/exports/b.csv/path").json()

        assert data == {"name": "b.csv", "path": str(export_folder / "b.csv")}

    def test_copy_path(self, client, clipboard, export_folder):
        data = client.post("/api/exports/b.csv/copy-path").json()

        assert data["success"] is True
        assert data["message"] == "File path copied to clipboard!"
        clipboard.write_text.assert_awaited_once_with(str(export_folder / "b.csv"))


class TestBrowserRuntime:

    def test_catalog_tells_user_to_use_browser_downloads(self, browser_client):
        data = browser_client.get("/api/exports").json()

        assert data["host_available"] is False
        assert data["entries"] == []
        assert data["message"] == (
            "Please open your browser downloads to view and manage your exported files."
        )

    def test_host_status(self, browser_client):
        data = browser_client.get("/api/host").json()

        assert data["host_runtime"] == "browser"
        assert data["host_available"] is False
        assert data["export_directory"] is None

    def test_folder_is_never_created(self, browser_client, tmp_path):
        browser_client.post("/api/exports/refresh")

        assert not (tmp_path / "Documents" / "NepaliWallet").exists()


def test_websocket_greets_with_catalog_snapshot(client):
    with client.websocket_connect("/api/ws/live") as websocket:
        message = websocket.receive_json()

    assert message["type"] == "catalog_snapshot"
    assert [entry["name"] for entry in message["data"]["entries"]] == ["b.csv", "c.pdf", "a.txt"]


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_binary_transport_base64_serves_same_bytes(monkeypatch, tmp_path, export_folder):
    _configure(monkeypatch, tmp_path, "desktop")
    monkeypatch.setenv("BINARY_TRANSPORT", "base64")

    with TestClient(app) as test_client:
        url = test_client.get("/api/exports/c.pdf/preview").json()["handle"]["url"]
        content = test_client.get(url).content

    assert content == b"%PDF-1.4 test"
