"""
Private key material loader.

Resolves a key input, either inline PEM text or a path to a PEM file, into
validated PEM text. Only the framing is checked here; parsing the key itself
is the job of the signing key provider.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..entities.exceptions import PrivateKeyError
from ..utils.logging_utils import get_logger

logger = get_logger()

PEM_BEGIN_MARKER = "-----BEGIN"
PEM_END_MARKER = "-----END"


class KeyMaterialLoader:
    """Loads private key material from inline PEM content or a file path."""

    @classmethod
    def load(cls, key_input: str | os.PathLike) -> str:
        """
        Load a private key, detecting whether the input is PEM content or a path.

        Args:
            key_input: Inline PEM text, or a path to a PEM file (``~`` is expanded).

        Returns:
            PEM text. Inline content is returned trimmed, file content unchanged.

        Raises:
            PrivateKeyError: If the file is missing or unreadable, or the PEM
                framing is invalid.
        """
        trimmed = os.fspath(key_input).strip()

        if trimmed.startswith(PEM_BEGIN_MARKER):
            cls.validate_pem(trimmed)
            return trimmed

        return cls.load_from_file(trimmed)

    @classmethod
    def load_from_file(cls, path: str | os.PathLike) -> str:
        key_path = Path(path).expanduser()

        if not key_path.exists():
            raise PrivateKeyError(f"Private key file not found: {path}")

        try:
            content = key_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PrivateKeyError(f"Failed to read private key file: {e}") from e

        cls.validate_pem(content)
        logger.debug("Loaded private key material from %s", key_path)

        return content

    @staticmethod
    def validate_pem(content: str) -> None:
        """Check that both the BEGIN and END markers are present."""
        if PEM_BEGIN_MARKER not in content or PEM_END_MARKER not in content:
            raise PrivateKeyError("Not a valid PEM format")
