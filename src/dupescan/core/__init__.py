"""
Core duplicate scan engine — walker, size bucketer, hasher, grouper, and pipeline orchestrator.

This package contains the performance-critical foundation of dupescan:
- TreeWalkerImpl: recursive directory traversal with suffix exclusions and a size threshold
- SizeBucketerImpl: drops files whose size is unique
- HasherImpl + XXHashAlgorithmImpl / Crc32AlgorithmImpl: streaming full-content checksums
- ContentHashStage: sequential or thread-pool hashing of size-duplicate candidates
- DuplicateGrouperImpl: checksum grouping with single-file groups pruned
- DuplicateFinderImpl: size → hash → group pipeline
- Models: File, DuplicateGroup, RunStats and ScanParams

All components are pure Python with no UI dependencies.
"""

from .walker import TreeWalkerImpl
from .bucketer import SizeBucketerImpl
from .hasher import (
    HasherImpl, XXHashAlgorithmImpl, Crc32AlgorithmImpl, ContentHashStage, algorithm_for)
from .grouper import DuplicateGrouperImpl
from .finder import DuplicateFinderImpl
from .models import (
    File, DuplicateGroup, RunStats, ScanParams, BucketMode, HashAlgorithmName,
    DEFAULT_MIN_SIZE, DEFAULT_EXCLUDED_SUFFIXES)

__all__ = [
    "TreeWalkerImpl",
    "SizeBucketerImpl",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "Crc32AlgorithmImpl",
    "ContentHashStage",
    "algorithm_for",
    "DuplicateGrouperImpl",
    "DuplicateFinderImpl",
    "File",
    "DuplicateGroup",
    "RunStats",
    "ScanParams",
    "BucketMode",
    "HashAlgorithmName",
    "DEFAULT_MIN_SIZE",
    "DEFAULT_EXCLUDED_SUFFIXES",
]
