from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union
import json
import logging
import math
import os
import threading

from app.core.config import settings

logger = logging.getLogger(__name__)


class ConfigWriteError(Exception):
    """Raised when the configuration document could not be persisted."""


def _reject_constant(name: str):
    # NaN / Infinity are accepted by json.loads but are not valid JSON
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def decode_document(raw: Union[str, bytes]) -> Any:
    """
    Parse a configuration document from raw text or bytes.
    Raises ValueError (JSONDecodeError / UnicodeDecodeError included) when the
    input is not well-formed JSON, holds numbers that overflow a float, or is
    nested too deeply to decode.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except RecursionError as e:
        raise ValueError("Document nested too deeply") from e


class ConfigRepository(ABC):
    @abstractmethod
    def read(self) -> Any:
        pass

    @abstractmethod
    def write(self, value: Any):
        pass


class FileConfigRepository(ConfigRepository):
    """
    Single JSON document on disk. No caching: every read goes back to the file.
    Reads and writes share one lock; writes replace the file atomically.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def read(self) -> Any:
        with self._lock:
            try:
                raw = self.path.read_bytes()
            except FileNotFoundError:
                logger.warning(f"Config file not found at {self.path}, using empty configuration")
                return {}
            except OSError as e:
                logger.error(f"Error reading config {self.path}: {e}")
                return {}

        try:
            return decode_document(raw)
        except ValueError as e:
            logger.error(f"Config file {self.path} is corrupt, using empty configuration: {e}")
            return {}

    def write(self, value: Any):
        try:
            payload = json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError, RecursionError) as e:
            logger.error(f"Config value cannot be serialised: {e}")
            raise ConfigWriteError(str(e)) from e
        tmp_path = self.path.with_name(self.path.name + ".tmp")

        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(tmp_path, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_path, self.path)
            except OSError as e:
                logger.error(f"Failed to write config {self.path}: {e}")
                try:
                    tmp_path.unlink()
                except OSError:
                    pass
                raise ConfigWriteError(str(e)) from e

        logger.info(f"Config saved to {self.path} ({len(payload)} chars)")


# Global Accessor
config_repo = FileConfigRepository(settings.CONFIG_FILE)
