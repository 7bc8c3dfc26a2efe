"""
Registry of default values for configuration files.

Every ConfigStore class owns one DefaultRegistry, so differently configured
stores (profiles) can register different defaults for the same logical path.
"""

import copy
from typing import Any, Dict, Iterator, Mapping


class DefaultRegistry:
    """Maps logical paths to the default values of their documents."""

    def __init__(self) -> None:
        self._defaults: Dict[str, Dict[Any, Any]] = {}

    def register(self, path: str, default: Mapping[Any, Any]) -> None:
        """
        Register the default values of the document at ``path``.

        Documents already loaded by a store keep the defaults they were
        created with.
        """
        self._defaults[path] = copy.deepcopy(dict(default))

    def get(self, path: str) -> Dict[Any, Any]:
        """Return the defaults registered for ``path``, or an empty dict."""
        return self._defaults.get(path, {})

    def __contains__(self, path: str) -> bool:
        return path in self._defaults

    def __iter__(self) -> Iterator[str]:
        return iter(self._defaults)

    def __len__(self) -> int:
        return len(self._defaults)

    def __repr__(self) -> str:
        return f"DefaultRegistry({sorted(self._defaults)!r})"
