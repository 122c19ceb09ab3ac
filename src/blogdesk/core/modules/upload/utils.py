"""Utility functions for upload handling."""

import re
from pathlib import Path
from urllib.parse import quote

ASSETS_DIR = "assets"


def sanitize_filename(filename: str) -> str:
    """Sanitize a client-supplied filename for use as a repository path segment.

    Removes dangerous characters, prevents path traversal, and handles edge cases
    while preserving readability and file extensions.
    """
    # Remove path components to prevent traversal attacks
    filename = Path(filename).name

    # Remove leading dots to prevent hidden files
    filename = filename.lstrip(".")

    # Allow only word characters, spaces, dots, and hyphens
    sanitized = re.sub(r"[^\w\s.-]", "_", filename)
    sanitized = re.sub(r"_+", "_", sanitized)
    sanitized = re.sub(r"\s+", " ", sanitized)

    # Limit length to 100 characters while preserving extension
    if len(sanitized) > 100:
        parts = sanitized.rsplit(".", 1)
        if len(parts) == 2:
            name, ext = parts
            max_name_len = 96 - len(ext)
            sanitized = f"{name[:max_name_len]}.{ext}" if max_name_len > 0 else f"file.{ext}"
        else:
            sanitized = sanitized[:100]

    # Empty, or nothing left but whitespace/underscores/dots/hyphens
    if not sanitized or not re.sub(r"[\s._-]", "", sanitized):
        sanitized = "unnamed_file"

    return sanitized


def build_asset_path(filename: str | None, timestamp_ms: int) -> str:
    """Repository path for an uploaded file, e.g. assets/1760860000000-photo.png.

    A missing filename becomes file-<timestamp>.
    """
    name = sanitize_filename(filename) if filename else f"file-{timestamp_ms}"
    return f"{ASSETS_DIR}/{timestamp_ms}-{name}"


def build_raw_url(repo: str, branch: str, path: str) -> str:
    """Public raw.githubusercontent.com URL for a file in a repository."""
    return f"https://raw.githubusercontent.com/{repo}/{branch}/{quote(path)}"
