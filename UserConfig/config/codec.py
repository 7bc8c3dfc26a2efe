"""
YAML codec for configuration documents.

Documents are plain top-level mappings. A missing or empty file decodes to
an empty dictionary.
"""

import os
from typing import Any, Dict, Mapping, Union

import yaml

from UserConfig.config.defaults import DEFAULT_ENCODING
from UserConfig.exceptions import DocumentFormatError


def decode(data: Union[bytes, str, None]) -> Dict[Any, Any]:
    """
    Decode YAML text into a dictionary.

    Args:
        data: Raw document content; ``None`` and empty content are accepted

    Returns:
        Dict[Any, Any]: The decoded mapping

    Raises:
        DocumentFormatError: If the document is not a mapping
        yaml.YAMLError: If the document is not valid YAML
    """
    if not data:
        return {}
    if isinstance(data, bytes):
        data = data.decode(DEFAULT_ENCODING)

    value = yaml.safe_load(data)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DocumentFormatError(
            f"Expected a mapping at the top of the document, got {type(value).__name__}"
        )
    return value


def encode(mapping: Mapping[Any, Any]) -> bytes:
    """
    Encode a mapping as a YAML document.

    The output starts with the ``---`` marker followed by one block-style
    entry per key, in the mapping's iteration order.
    """
    text = yaml.safe_dump(
        dict(mapping),
        explicit_start=True,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return text.encode(DEFAULT_ENCODING)


def load_file(path: str) -> Dict[Any, Any]:
    """Decode the YAML file at ``path``, or return ``{}`` if it does not exist."""
    if not os.path.exists(path):
        return {}
    with open(path, 'rb') as f:
        return decode(f.read())
