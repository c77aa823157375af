from enum import Enum

CONFIG_PATH = "/config"
UPDATE_CONFIG_PATH = "/update-config"
API_PREFIXES = (CONFIG_PATH, UPDATE_CONFIG_PATH)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

class RequestKind(str, Enum):
    SERVE_CONFIG = "SERVE_CONFIG"
    UPDATE_CONFIG = "UPDATE_CONFIG"
    PREFLIGHT = "PREFLIGHT"
    SERVE_STATIC = "SERVE_STATIC"
    UNSUPPORTED = "UNSUPPORTED"

def is_api_path(path: str) -> bool:
    return path.startswith(API_PREFIXES)

def classify_request(method: str, path: str) -> RequestKind:
    """
    Decide which handler a request belongs to.
    `path` must already have its query string stripped.
    """
    method = method.upper()

    if method == "OPTIONS" and is_api_path(path):
        return RequestKind.PREFLIGHT
    if method == "GET":
        if path == CONFIG_PATH:
            return RequestKind.SERVE_CONFIG
        return RequestKind.SERVE_STATIC
    if method == "POST" and path == UPDATE_CONFIG_PATH:
        return RequestKind.UPDATE_CONFIG

    return RequestKind.UNSUPPORTED
