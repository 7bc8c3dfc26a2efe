"""
UserConfig - Per-application configuration directories backed by YAML files.

Key Components:
- ConfigStore: Creates the configuration directory and caches its documents
- YAMLFile: One YAML document with default values and in-memory edits
- DefaultRegistry: Default values registered per logical path

Usage Examples:
    # Register defaults and create a configuration file
    from UserConfig import ConfigStore
    ConfigStore.register_default("conf.yaml", {"hello": "world"})
    store = ConfigStore(".myapp")
    store.create("conf.yaml")

    # Independent defaults for a second application profile
    class ToolConfig(ConfigStore):
        pass
    ToolConfig.register_default("conf.yaml", {"hello": "tool"})

    # Setting the log level
    from UserConfig import set_log_level
    set_log_level('debug')
"""

from UserConfig.config import ConfigStore, DefaultRegistry, MergedView, YAMLFile
from UserConfig.config.store import UserConfig
from UserConfig.exceptions import (
    UserConfigError,
    DirectoryExistsError,
    InvalidPathError,
    EmptyPathError,
    DocumentFormatError,
)
from UserConfig.utils.logging import get_logger, set_log_level, configure_logging

__version__ = '1.0.0'

__all__ = [
    'ConfigStore', 'UserConfig', 'YAMLFile', 'MergedView', 'DefaultRegistry',
    'UserConfigError', 'DirectoryExistsError', 'InvalidPathError',
    'EmptyPathError', 'DocumentFormatError',
    'get_logger', 'set_log_level', 'configure_logging',
]
