"""Configuration loaded from the project's data directory."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

_ESCAPED_NEWLINE = re.compile(r"\\n", re.IGNORECASE)


def _json_string(value: Any) -> Optional[str]:
    """Render a JSON scalar as a string, or None where no string form exists."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return None


def _read_json_object(path: Path) -> Optional[dict]:
    """Read ``path`` as a JSON object; log and return None if that fails."""
    try:
        content = path.read_text(encoding="utf-8-sig")
    except OSError:
        logger.warning("Failed to load file: %s", path)
        return None
    try:
        document = json.loads(content)
    except json.JSONDecodeError:
        return None
    return document if isinstance(document, dict) else None


class DataManager:
    """API links, window size and sentences read from ``<project>/data``."""

    def __init__(self, project_dir: Union[str, Path, None] = None) -> None:
        self.project_dir = Path(project_dir) if project_dir is not None else Path.cwd()
        self.api_map: dict[str, str] = {}
        self.window_width = 0
        self.window_height = 0
        self.sentences: list[str] = []

    @property
    def data_dir(self) -> Path:
        return self.project_dir / "data"

    def load_data(self) -> None:
        """Load api.txt, common.txt and sentence.txt; missing files are logged."""
        self._load_api_map(self.data_dir / "api.txt")
        self._load_window_settings(self.data_dir / "common.txt")
        self._load_sentences(self.data_dir / "sentence.txt")

    def _load_api_map(self, path: Path) -> None:
        document = _read_json_object(path)
        if document is None:
            return
        for key, value in document.items():
            text = _json_string(value)
            if text is not None:
                self.api_map[key] = text

    def _load_window_settings(self, path: Path) -> None:
        document = _read_json_object(path)
        if document is None:
            return
        self.window_width = self._integer_field(document, "width")
        self.window_height = self._integer_field(document, "height")

    @staticmethod
    def _integer_field(document: dict, name: str) -> int:
        value = document.get(name)
        if isinstance(value, (int, float)):
            return int(value)
        return 0

    def _load_sentences(self, path: Path) -> None:
        try:
            content = path.read_text(encoding="utf-8-sig")
        except OSError:
            logger.error("Failed to load file: %s", path)
            return
        self.sentences = [
            _ESCAPED_NEWLINE.sub("\n", line) for line in content.splitlines() if line
        ]
        for line in self.sentences:
            logger.info("Line: %s", line)

    def get_api(self, key: str) -> str:
        """Return the link stored under ``key``, or an empty string."""
        return self.api_map.get(key, "")