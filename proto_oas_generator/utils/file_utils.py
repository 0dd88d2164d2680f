"""
File utilities for the protobuf naming tools.

This module provides the small amount of file handling the command line
interface needs: reading input documents and writing results.
"""

import json
from pathlib import Path
from typing import Any


def read_document(path: Path) -> bytes:
    """Read a document as raw bytes.

    Args:
        path: Path to the document.

    Returns:
        The document content.

    Raises:
        FileNotFoundError: If the document does not exist.
    """
    return path.read_bytes()


def write_document(path: Path, content: str | bytes) -> None:
    """Write a document, creating parent directories as needed.

    Args:
        path: Destination path.
        content: Text (written as UTF-8) or raw bytes.
    """
    ensure_directory(path.parent)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")


def load_json_context(path: Path) -> dict[str, Any]:
    """Load a template context from a JSON file.

    Args:
        path: Path to a JSON file holding an object.

    Returns:
        The decoded object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        TypeError: If the JSON document is not an object.
    """
    context = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(context, dict):
        msg = f"Template context must be a JSON object, got {type(context).__name__}"
        raise TypeError(msg)
    return context


def ensure_directory(directory: Path) -> None:
    """Ensure that a directory exists.

    Args:
        directory: Path to the directory to create.
    """
    directory.mkdir(parents=True, exist_ok=True)
