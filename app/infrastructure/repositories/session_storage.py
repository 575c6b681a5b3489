"""File-based session storage for the Python client."""
import json
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

from app.domain.interfaces.session_storage import ISessionStorage


class FileSessionStorage(ISessionStorage):
    """
    Stores the signed-in user's public profile and token in a JSON file.

    Follows Repository Pattern; the file plays the role of the browser's
    local storage.
    """
    
    def __init__(self, path: str):
        """
        Initialize the session storage.
        
        Args:
            path: Location of the session file
        """
        self.path = Path(path)
        self._logger = logging.getLogger(__name__)
    
    def load(self) -> Optional[Dict[str, Any]]:
        """Read session data from the file."""
        if not self.path.exists():
            return None
        
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Corrupt session file {self.path}: {e}") from e
        
        if not isinstance(data, dict):
            raise ValueError(f"Corrupt session file {self.path}: expected an object")
        return data
    
    def save(self, data: Dict[str, Any]) -> None:
        """Write session data atomically (write then rename)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        os.replace(tmp_path, self.path)
        self._logger.debug(f"Session stored in {self.path}")
    
    def clear(self) -> None:
        """Remove the session file."""
        try:
            self.path.unlink()
            self._logger.debug(f"Session file {self.path} removed")
        except FileNotFoundError:
            pass
