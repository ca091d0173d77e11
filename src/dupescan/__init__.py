"""
dupescan — fast duplicate file finder for reclaiming disk space.

Core features:
- Walks a directory tree, skipping .git, .terraform and node_modules
- Size pre-filter: only files sharing a size with another file are hashed
- Full-content xxHash64 (or CRC-32) checksums, optionally on a thread pool
- Wasted-space statistics and JSON output
- Report only: nothing is ever deleted
"""

from pathlib import Path

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupescan")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from dupescan.commands import ScanCommand
from dupescan.core import (
    ScanParams, BucketMode, HashAlgorithmName, File, DuplicateGroup, RunStats)
from dupescan.report import render_json, groups_to_dict, stats_to_dict
from dupescan.utils.convert_utils import ConvertUtils

__all__ = [
    "ScanCommand",
    "ScanParams",
    "BucketMode",
    "HashAlgorithmName",
    "File",
    "DuplicateGroup",
    "RunStats",
    "render_json",
    "groups_to_dict",
    "stats_to_dict",
    "ConvertUtils",
    "__version__",
]
