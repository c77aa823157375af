import pytest
from app.core.config_store import config_repo
from app.core.static_files import static_assets

INDEX_HTML = b"<!DOCTYPE html><html><body>Tax Calculator</body></html>"

@pytest.fixture(autouse=True)
def isolated_storage(tmp_path_factory, monkeypatch):
    """Point the global repositories at a throwaway config file and static root."""
    storage_dir = tmp_path_factory.mktemp("storage")
    public_dir = storage_dir / "public"
    public_dir.mkdir()
    (public_dir / "index.html").write_bytes(INDEX_HTML)

    monkeypatch.setattr(config_repo, "path", storage_dir / "config.json")
    monkeypatch.setattr(static_assets, "root", public_dir)
    return storage_dir
