"""
UserConfig configuration directory system.

This package manages a per-application configuration directory: it creates
the directory with restrictive permissions, maps logical relative paths to
files inside it, and caches YAML documents that overlay their values on
registered defaults.

Usage:
    from UserConfig.config import ConfigStore

    ConfigStore.register_default("settings.yaml", {"editor": "vim"})
    store = ConfigStore(".myapp")
    settings = store.load("settings.yaml")
    settings["editor"] = "emacs"
    store.save_all()
"""

from UserConfig.config.document import MergedView, YAMLFile
from UserConfig.config.paths import default_root, resolve_path
from UserConfig.config.registry import DefaultRegistry
from UserConfig.config.store import ConfigStore

__all__ = [
    "ConfigStore",
    "DefaultRegistry",
    "MergedView",
    "YAMLFile",
    "default_root",
    "resolve_path",
]
