from fastapi.testclient import TestClient
from app.main import app
from app.core.static_files import static_assets, content_type_for, StaticFileNotFound
import os
import pytest

client = TestClient(app)

def test_root_serves_index():
    print("Testing default document...")
    root = client.get("/")
    index = client.get("/index.html")

    assert root.status_code == 200
    assert index.status_code == 200
    assert root.content == index.content
    assert root.headers["content-type"] == index.headers["content-type"] == "text/html"

def test_query_string_is_ignored():
    response = client.get("/index.html?v=3")
    assert response.status_code == 200
    assert response.content == client.get("/index.html").content

def test_nested_assets_and_content_types():
    (static_assets.root / "css").mkdir()
    (static_assets.root / "css" / "site.css").write_text("body { margin: 0; }")
    (static_assets.root / "app.js").write_text("console.log('ok');")
    (static_assets.root / "logo.PNG").write_bytes(b"\x89PNG\r\n\x1a\n")
    (static_assets.root / "notes.txt").write_text("plain")

    response = client.get("/css/site.css")
    assert response.status_code == 200
    assert response.headers["content-type"] == "text/css"
    assert response.text == "body { margin: 0; }"

    assert client.get("/app.js").headers["content-type"] == "application/javascript"

    response = client.get("/logo.PNG")
    assert response.headers["content-type"] == "image/png"
    assert response.content == b"\x89PNG\r\n\x1a\n"

    assert client.get("/notes.txt").headers["content-type"] == "application/octet-stream"

def test_unknown_path_is_404():
    response = client.get("/missing.html")
    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "404 Not Found"

def test_directory_is_404():
    (static_assets.root / "images").mkdir()
    response = client.get("/images")
    assert response.status_code == 404

def test_missing_default_document_is_404():
    (static_assets.root / "index.html").unlink()
    response = client.get("/")
    assert response.status_code == 404
    assert response.text == "404 Not Found"

def test_content_type_table():
    assert content_type_for("a.html") == "text/html"
    assert content_type_for("a.json") == "application/json"
    assert content_type_for("a.jpg") == "image/jpeg"
    assert content_type_for("a.JPEG") == "image/jpeg"
    assert content_type_for("a.gif") == "image/gif"
    assert content_type_for("a.svg") == "image/svg+xml"
    assert content_type_for("favicon.ico") == "image/x-icon"
    assert content_type_for("Makefile") == "application/octet-stream"
    assert content_type_for("archive.tar.gz") == "application/octet-stream"

def test_resolve_default_document():
    assert static_assets.resolve("") == (static_assets.root / "index.html").resolve()
    assert static_assets.resolve("/") == (static_assets.root / "index.html").resolve()

@pytest.mark.parametrize("path", [
    "../config.json",
    "/../../etc/passwd",
    "css/../../config.json",
])
def test_traversal_is_rejected(path):
    # config.json sits right next to the static root in the fixture layout
    (static_assets.root.parent / "config.json").write_text("{}")

    with pytest.raises(StaticFileNotFound):
        static_assets.locate(path)

def test_symlink_out_of_root_is_rejected(tmp_path):
    secret = tmp_path / "secret.txt"
    secret.write_text("do not serve")
    link = static_assets.root / "leak.txt"
    try:
        link.symlink_to(secret)
    except OSError:
        pytest.skip("symlinks not supported")

    with pytest.raises(StaticFileNotFound):
        static_assets.resolve("leak.txt")
    assert client.get("/leak.txt").status_code == 404

def test_nul_byte_in_path_is_404():
    print("Testing NUL byte in static path...")
    response = client.get("/a%00b")
    assert response.status_code == 404
    assert response.text == "404 Not Found"

    with pytest.raises(StaticFileNotFound):
        static_assets.locate("a\x00b")

def test_unreadable_file_is_404():
    secret = static_assets.root / "locked.html"
    secret.write_text("locked")
    secret.chmod(0)
    try:
        if os.access(secret, os.R_OK):
            pytest.skip("running with permissions that bypass file modes")
        assert client.get("/locked.html").status_code == 404
    finally:
        secret.chmod(0o644)

def test_large_file_is_served_intact():
    payload = bytes(range(256)) * 4096
    (static_assets.root / "blob.bin").write_bytes(payload)

    response = client.get("/blob.bin")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/octet-stream"
    assert response.content == payload
