from pathlib import Path
from typing import Tuple
import logging
import os

from app.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = "index.html"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}


class StaticFileNotFound(Exception):
    pass


def content_type_for(path) -> str:
    return CONTENT_TYPES.get(Path(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


class StaticAssets:
    """Read-only view over the files under a single root directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def resolve(self, relative_path: str) -> Path:
        """
        Map a URL path onto a file under the root.
        Empty path and "/" map to the default document. Any path that
        canonicalises outside the root is rejected as not found.
        """
        relative_path = relative_path.lstrip("/")
        if not relative_path:
            relative_path = DEFAULT_DOCUMENT

        root = self.root.resolve()
        try:
            candidate = (root / relative_path).resolve()
        except (OSError, ValueError) as e:
            # e.g. embedded NUL bytes or symlink loops
            raise StaticFileNotFound(str(e)) from e
        if not candidate.is_relative_to(root):
            raise StaticFileNotFound(f"Path escapes static root: {relative_path}")
        return candidate

    def locate(self, relative_path: str) -> Tuple[Path, str]:
        """Return a servable regular file under the root and its content type."""
        full_path = self.resolve(relative_path)
        try:
            is_file = full_path.is_file()
        except (OSError, ValueError) as e:
            raise StaticFileNotFound(str(e)) from e
        if not is_file:
            raise StaticFileNotFound(f"Not a regular file: {full_path}")
        if not os.access(full_path, os.R_OK):
            raise StaticFileNotFound(f"Not readable: {full_path}")
        return full_path, content_type_for(full_path)


# Global Accessor
static_assets = StaticAssets(settings.PUBLIC_DIR)
