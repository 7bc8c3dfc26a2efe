"""
Path resolution for the UserConfig configuration directory.

Logical paths are always relative to the configuration directory. Absolute
paths and paths that climb out of the directory with ``..`` are rejected.
"""

import os
from pathlib import Path

from UserConfig.exceptions import InvalidPathError
from UserConfig.utils.logging import get_logger

logger = get_logger(__name__)


def default_root() -> str:
    """
    Return the directory that holds configuration directories by default.

    Returns:
        str: The user's home directory (``HOME`` when set)
    """
    return os.environ.get("HOME") or str(Path.home())


def resolve_path(root: str, relative_path: str, create_parents: bool = False) -> str:
    """
    Join a logical path onto the configuration root.

    Args:
        root: Absolute path of the configuration directory
        relative_path: Logical path inside the configuration directory
        create_parents: Create the missing ancestor directories of the result

    Returns:
        str: Normalized absolute path of the logical path

    Raises:
        InvalidPathError: If the logical path is absolute or escapes the root
    """
    if os.path.isabs(relative_path):
        raise InvalidPathError(relative_path, "absolute paths are not allowed")

    root = os.path.normpath(root)
    path = os.path.normpath(os.path.join(root, relative_path))
    if path != root and not path.startswith(root.rstrip(os.sep) + os.sep):
        raise InvalidPathError(relative_path, "path leaves the configuration directory")

    if create_parents:
        parent = os.path.dirname(path)
        if not os.path.isdir(parent):
            logger.debug(f"Creating parent directory {parent}")
            os.makedirs(parent, exist_ok=True)

    return path
