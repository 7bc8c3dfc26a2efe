"""
Configuration store for UserConfig.

This module implements the ConfigStore class that manages one configuration
directory below a root directory (the user's home by default). It resolves
logical paths inside the directory, keeps one cached YAMLFile per logical
path, and offers helpers for raw files and sub-directories.
"""

import os
import re
import shutil
from typing import Any, Callable, Dict, IO, List, Mapping, Optional, Union

from UserConfig.config.defaults import DEFAULT_PERMISSION
from UserConfig.config.document import YAMLFile
from UserConfig.config.paths import default_root, resolve_path
from UserConfig.config.registry import DefaultRegistry
from UserConfig.exceptions import DirectoryExistsError, EmptyPathError
from UserConfig.utils.logging import get_logger

_DOT_ENTRY = re.compile(r'^\.+$')


class ConfigStore:
    """
    Configuration directory with cached YAML documents.

    Each subclass owns its own DefaultRegistry, so a subclass acts as a
    configuration profile with independent defaults.

    Attributes:
        registry (DefaultRegistry): Defaults used by instances of this class
        directory (str): Absolute path of the configuration directory

    Examples:
        >>> ConfigStore.register_default("settings.yaml", {"theme": "dark"})
        >>> store = ConfigStore(".myapp")
        >>> store["settings.yaml"]["theme"]
        'dark'
    """
    registry = DefaultRegistry()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.registry = DefaultRegistry()

    @classmethod
    def register_default(cls, path: str, default: Mapping[Any, Any]) -> None:
        """
        Register default values for the document at ``path``.

        Args:
            path: Logical path of the document
            default: Default key-value pairs of the document
        """
        cls.registry.register(path, default)

    @classmethod
    def default_value(cls) -> DefaultRegistry:
        """Return the registry holding the defaults of this class."""
        return cls.registry

    def __init__(self,
                 name: str,
                 root: Optional[str] = None,
                 permission: int = DEFAULT_PERMISSION,
                 exclusive: bool = False,
                 registry: Optional[DefaultRegistry] = None) -> None:
        """
        Open or create the configuration directory ``root/name``.

        Args:
            name: Name of the configuration directory
            root: Directory holding the configuration directory (default: home)
            permission: Permission bits of a newly created directory
            exclusive: Fail if the directory already exists
            registry: Defaults to use instead of the class registry

        Raises:
            DirectoryExistsError: If ``exclusive`` is set and the directory exists
        """
        self.logger = get_logger(__name__)
        self._directory = os.path.normpath(
            os.path.abspath(os.path.join(root or default_root(), name))
        )
        if registry is not None:
            self.registry = registry
        self._files: Dict[str, YAMLFile] = {}

        if os.path.exists(self._directory):
            if exclusive:
                raise DirectoryExistsError(self._directory)
        else:
            os.makedirs(self._directory, mode=permission)
            # makedirs is subject to the umask
            os.chmod(self._directory, permission)
            self.logger.info(f"Created configuration directory {self._directory} (mode {oct(permission)})")

    @property
    def directory(self) -> str:
        return self._directory

    def file_path(self, path: str, create_parents: bool = False) -> str:
        """
        Return the absolute path of a logical path.

        Args:
            path: Logical path inside the configuration directory
            create_parents: Create missing parent directories

        Raises:
            InvalidPathError: If ``path`` is absolute or leaves the directory
        """
        return resolve_path(self._directory, path, create_parents)

    def default_for(self, path: str) -> Dict[Any, Any]:
        return self.registry.get(path)

    def _load_file(self, path: str, merge: bool = False, value: Optional[Mapping[Any, Any]] = None) -> YAMLFile:
        default = value if value is not None else self.default_for(path)
        yaml_file = YAMLFile(self.file_path(path), default, merge=merge)
        self._files[path] = yaml_file
        return yaml_file

    def load(self, path: str) -> YAMLFile:
        """
        Return the document at ``path``.

        The document is read from disk on first access and cached; later
        calls return the same YAMLFile instance.
        """
        yaml_file = self._files.get(path)
        if yaml_file is None:
            yaml_file = self._load_file(path)
        return yaml_file

    __getitem__ = load

    def create(self, path: str, value: Optional[Mapping[Any, Any]] = None) -> YAMLFile:
        """
        Write the document at ``path`` filled with default values.

        Keys already present in the file are kept; missing keys are filled
        from ``value`` if given, otherwise from the registered defaults.

        Returns:
            YAMLFile: The saved document, which replaces any cached one
        """
        yaml_file = self._load_file(path, merge=True, value=value)
        yaml_file.save()
        return yaml_file

    def save_all(self) -> None:
        """Save every document loaded by this store."""
        for yaml_file in self._files.values():
            yaml_file.save()

    def all_file_paths(self) -> List[str]:
        """Return the absolute paths of all cached documents."""
        return [self.file_path(path) for path in self._files]

    def exists(self, path: str) -> Union[str, bool]:
        """Return the absolute path if ``path`` exists, otherwise False."""
        fpath = self.file_path(path)
        if os.path.exists(fpath):
            return fpath
        return False

    def delete(self, path: str) -> None:
        """
        Remove the file or directory at ``path`` recursively.

        A document cached for ``path`` stays in the cache and is returned by
        later ``load`` calls.

        Raises:
            EmptyPathError: If ``path`` is empty or resolves to the directory itself
        """
        if not path:
            raise EmptyPathError("Cannot delete the configuration directory itself")
        fpath = self.file_path(path)
        if fpath == self._directory:
            raise EmptyPathError(f"Path {path!r} refers to the configuration directory itself")
        if os.path.isdir(fpath) and not os.path.islink(fpath):
            shutil.rmtree(fpath)
        else:
            os.remove(fpath)
        self.logger.info(f"Deleted {fpath}")

    def make_directory(self, path: str, mode: Optional[int] = None) -> str:
        """
        Create the directory ``path`` inside the configuration directory.

        Args:
            path: Logical path of the directory
            mode: Permission bits applied to the directory, even if it
                already existed

        Returns:
            str: Absolute path of the directory
        """
        fpath = self.file_path(path)
        if not os.path.exists(fpath):
            os.makedirs(fpath)
        if mode is not None:
            os.chmod(fpath, mode)
            self.logger.debug(f"Changed mode of {fpath} to {oct(mode)}")
        return fpath

    def list_in_directory(self, path: str, absolute: bool = False) -> Optional[List[str]]:
        """
        List the entries of the directory ``path``.

        Args:
            path: Logical path of the directory
            absolute: Return absolute paths instead of entry names

        Returns:
            Optional[List[str]]: Sorted entries, or None if ``path`` is not a directory
        """
        fpath = self.file_path(path)
        if not os.path.isdir(fpath):
            return None
        entries = sorted(name for name in os.listdir(fpath) if not _DOT_ENTRY.match(name))
        if absolute:
            return [os.path.join(fpath, name) for name in entries]
        return entries

    def open_raw(self, path: str, mode: str = 'r', func: Optional[Callable[[IO], Any]] = None, **kwargs: Any) -> Union[IO, str]:
        """
        Open a raw file inside the configuration directory.

        Parent directories are created first. With ``func`` the file is passed
        to it and always closed afterwards, and the absolute path is returned.
        Otherwise the open file object is returned and the caller closes it
        (it can be used in a ``with`` statement).

        Args:
            path: Logical path of the file
            mode: Mode passed to ``open``
            func: Callable receiving the open file
            **kwargs: Extra arguments passed to ``open``
        """
        fpath = self.file_path(path, create_parents=True)
        if func is None:
            return open(fpath, mode, **kwargs)
        with open(fpath, mode, **kwargs) as f:
            func(f)
        return fpath

    def read_raw(self, path: str, encoding: Optional[str] = None) -> Union[bytes, str, None]:
        """
        Return the content of the file at ``path``.

        Args:
            path: Logical path of the file
            encoding: Decode the content with this encoding instead of returning bytes

        Returns:
            The content, or None if the file does not exist
        """
        fpath = self.file_path(path)
        if not os.path.isfile(fpath):
            return None
        with open(fpath, 'rb') as f:
            data = f.read()
        if encoding is not None:
            return data.decode(encoding)
        return data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._directory!r})"


# Alias of ConfigStore
UserConfig = ConfigStore
