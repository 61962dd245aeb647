"""JSON file storage.

Provides a thin wrapper around file I/O operations for JSON data.
Low-level errors (missing permissions, corrupt files) are re-raised as
StorageError with a readable message.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the underlying store cannot complete an operation."""


class JsonStorage:
    """Low-level JSON file I/O.

    This class wraps basic JSON operations (load/save). It does not contain
    any domain logic - just file I/O.

    Example:
        storage = JsonStorage()
        try:
            data = storage.load_json(Path("tasks.json"))
        except StorageError as e:
            print(f"Error: {e}")
    """

    def load_json(self, path: Path) -> dict[str, Any]:
        """Load JSON data from a file.

        Args:
            path: Path to the JSON file to read.

        Returns:
            The decoded JSON object.

        Raises:
            StorageError: If the file is missing, unreadable or not a JSON object.
        """
        try:
            if not path.exists():
                raise StorageError(f"File not found: {path}")

            content = path.read_text(encoding="utf-8")
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageError(f"Invalid JSON in {path}: {e}") from e
        except PermissionError as e:
            raise StorageError(f"Permission denied reading {path}") from e
        except OSError as e:
            raise StorageError(f"Error reading {path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Expected a JSON object in {path}")
        return data

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 2,
    ) -> None:
        """Save JSON data to a file.

        The data is written to a sibling temporary file first and then moved
        into place, so a failed write never leaves a truncated file behind.

        Args:
            path: Path to the JSON file to write.
            data: Dictionary to serialize as JSON.
            indent: JSON indentation level (default 2).

        Raises:
            StorageError: If the data cannot be serialized or written.
        """
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            # Ensure parent directory exists
            path.parent.mkdir(parents=True, exist_ok=True)

            content = json.dumps(data, indent=indent)
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(path)
        except TypeError as e:
            raise StorageError(f"Data not JSON serializable: {e}") from e
        except PermissionError as e:
            raise StorageError(f"Permission denied writing {path}") from e
        except OSError as e:
            raise StorageError(f"Error writing {path}: {e}") from e

        logger.debug("Wrote %s", path)
