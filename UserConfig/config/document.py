"""
Cached YAML documents.

A YAMLFile holds the decoded content of one configuration file together with
the default values registered for it. Reads fall back to the defaults, writes
only touch the in-memory cache until ``save`` is called.
"""

import copy
import os
from typing import Any, Dict, Iterator, KeysView, Mapping, Optional

from UserConfig.config import codec
from UserConfig.config.defaults import DEFAULT_ENCODING
from UserConfig.utils.logging import get_logger

logger = get_logger(__name__)


class MergedView:
    """
    Read-only view of a document's defaults overlaid by its cached values.

    Only answers size, emptiness, key iteration and membership queries.
    """

    def __init__(self, document: 'YAMLFile') -> None:
        self._document = document

    def _merged(self) -> Dict[Any, Any]:
        return self._document.to_dict(prefer_defaults=True)

    def __len__(self) -> int:
        return len(self._merged())

    def __iter__(self) -> Iterator[Any]:
        return iter(self._merged())

    def __contains__(self, key: Any) -> bool:
        return key in self._merged()

    def keys(self) -> KeysView:
        return self._merged().keys()

    def is_empty(self) -> bool:
        return not self._merged()


class YAMLFile:
    """
    One configuration file and its default values.

    Attributes:
        path (str): Absolute path of the YAML file
    """

    def __init__(self, path: str, default: Optional[Mapping[Any, Any]] = None, merge: bool = False) -> None:
        """
        Load the document at ``path``.

        Args:
            path: Absolute path of the YAML file; it need not exist yet
            default: Default values consulted when a key is not cached
            merge: Fill keys missing from the loaded document with the defaults
        """
        self.path = path
        self._default = copy.deepcopy(dict(default or {}))
        self._cache = codec.load_file(path)
        if merge:
            for key, value in self._default.items():
                if key not in self._cache:
                    self._cache[key] = copy.deepcopy(value)
        self._view = MergedView(self)
        logger.debug(f"Loaded {path} ({len(self._cache)} keys, merge={merge})")

    def get(self, key: Any) -> Any:
        """Return the cached value of ``key``, or its default, or None."""
        value = self._cache.get(key)
        if value is None:
            return self._default.get(key)
        return value

    def set(self, key: Any, value: Any) -> None:
        self._cache[key] = value

    def delete(self, key: Any) -> Any:
        """
        Remove ``key`` from the cached values.

        A default registered for the same key becomes visible again through
        ``get`` afterwards.

        Returns:
            Any: The removed value, or None if the key was not set
        """
        return self._cache.pop(key, None)

    def is_set(self, key: Any) -> bool:
        """Return True if ``key`` has a cached value, ignoring defaults."""
        return key in self._cache

    def to_dict(self, prefer_defaults: bool = False) -> Dict[Any, Any]:
        """
        Return the document content as a dictionary.

        Args:
            prefer_defaults: Return the defaults overlaid by the cached values
                instead of the cached values alone

        Returns:
            Dict[Any, Any]: Without ``prefer_defaults`` this is the live cache
        """
        if prefer_defaults:
            merged = dict(self._default)
            merged.update(self._cache)
            return merged
        return self._cache

    def serialize(self) -> bytes:
        """Encode the cached values, without defaults, as YAML."""
        return codec.encode(self._cache)

    def to_yaml(self) -> str:
        return self.serialize().decode(DEFAULT_ENCODING)

    def save(self) -> None:
        """Write the cached values to ``path``, replacing any previous content."""
        directory = os.path.dirname(self.path)
        if not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'wb') as f:
            f.write(self.serialize())
        logger.info(f"Saved configuration file {self.path}")

    def keys(self) -> KeysView:
        return self._view.keys()

    def is_empty(self) -> bool:
        return self._view.is_empty()

    @property
    def view(self) -> MergedView:
        return self._view

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        self.delete(key)

    def __len__(self) -> int:
        return len(self._view)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._view)

    def __contains__(self, key: Any) -> bool:
        return key in self._view

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path!r})"
