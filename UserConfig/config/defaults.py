"""
Default settings for the UserConfig package.

These values are used when a ConfigStore is constructed without explicit
options, and name the environment variables read by the logging helpers.
"""

# Permission bits applied to a newly created configuration directory
DEFAULT_PERMISSION = 0o700

# Encoding used for YAML documents on disk
DEFAULT_ENCODING = "utf-8"

# Environment variables read by UserConfig.utils.logging
LOG_LEVEL_ENV_VAR = "USERCONFIG_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "USERCONFIG_LOG_FORMAT"  # Can be 'json' or 'text'
LOG_FILE_ENV_VAR = "USERCONFIG_LOG_FILE"
