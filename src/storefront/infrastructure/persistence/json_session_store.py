"""JSON-file-backed session for the command-line storefront.

``login`` records the signed-in admin; ``logout`` forgets it.  There is
no credential check here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import SessionUser

logger = logging.getLogger(__name__)


class JsonSessionStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def current_user(self) -> SessionUser | None:
        if not self._file_path.exists():
            return None
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        user_id = raw.get("user_id")
        return SessionUser(user_id) if user_id else None

    def login(self, user_id: str) -> SessionUser:
        if not user_id.strip():
            raise ValidationError("User ID is required")
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps({"user_id": user_id}, indent=2) + "\n", encoding="utf-8"
        )
        logger.info("Signed in as %s", user_id)
        return SessionUser(user_id)

    def logout(self) -> bool:
        """Forget the signed-in user.  Returns False if nobody was signed in."""
        if not self._file_path.exists():
            return False
        self._file_path.unlink()
        logger.info("Signed out")
        return True
