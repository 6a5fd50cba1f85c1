"""Wine catalog store backed by a JSON file"""

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import DataLoadError
from ..models.wine import Wine

logger = logging.getLogger(__name__)


def parse_wine_id(value: Any) -> Optional[int]:
    """Coerce a path/query value to a wine id, or None if it is not numeric"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


class WineCatalog:
    """
    In-memory wine catalog loaded from a JSON array.

    The file is read once at construction and again only on an explicit
    reload(). A missing or malformed file yields an empty catalog.
    """

    def __init__(self, path: str):
        self.path = path
        self.wines: list[Wine] = []
        self._by_id: dict[int, Wine] = {}
        self.reload()

    def load(self) -> list[Wine]:
        """
        Read and parse the catalog file.

        Returns:
            The parsed records, or an empty list if the file cannot be read
        """
        try:
            raw = self._read_file()
        except DataLoadError as e:
            logger.error(f"Error loading wine data: {e.message}")
            return []

        use_native_ids = self._has_native_ids(raw)
        wines = []
        for position, record in enumerate(raw):
            if not isinstance(record, dict):
                logger.warning(f"Skipping catalog entry {position}: not an object")
                continue
            data = dict(record)
            if not use_native_ids:
                data["id"] = position
            try:
                wines.append(Wine.model_validate(data))
            except PydanticValidationError as e:
                logger.warning(f"Skipping catalog entry {position}: {e.error_count()} invalid field(s)")

        return wines

    def reload(self) -> int:
        """Replace the in-memory catalog with a fresh read of the file"""
        wines = self.load()
        self._by_id = {wine.id: wine for wine in wines}
        self.wines = wines
        logger.info(f"Catalog loaded: {len(wines)} wines from {self.path}")
        return len(wines)

    def get_all_wines(self) -> list[Wine]:
        """Get all wines"""
        return self.wines

    def get_wine(self, wine_id: Any) -> Optional[Wine]:
        """Get a wine by ID. Non-numeric or unknown ids give None."""
        parsed = parse_wine_id(wine_id)
        if parsed is None:
            return None
        return self._by_id.get(parsed)

    def _read_file(self) -> list:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise DataLoadError(self.path, e.strerror or str(e)) from e
        except json.JSONDecodeError as e:
            raise DataLoadError(self.path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

        if not isinstance(data, list):
            raise DataLoadError(self.path, "expected a JSON array of wine records")
        return data

    @staticmethod
    def _has_native_ids(raw: list) -> bool:
        """True when every record carries its own unique integer id"""
        ids = []
        for record in raw:
            if not isinstance(record, dict):
                continue
            wine_id = record.get("id")
            if isinstance(wine_id, bool) or not isinstance(wine_id, int):
                return False
            ids.append(wine_id)
        return bool(ids) and len(ids) == len(set(ids))
