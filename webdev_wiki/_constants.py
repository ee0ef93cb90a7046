"""Common literal values used across webdev_wiki.

These defaults keep the CLI, preview builder, and tests pointing at the same
repository layout.

Examples
--------
>>> from webdev_wiki import _constants
>>> _constants.DEFAULT_CONTENT_DIR.as_posix()
'content'
"""

from pathlib import Path

DEFAULT_CONTENT_DIR = Path("content")
DEFAULT_OUTPUT_DIR = Path("public")
