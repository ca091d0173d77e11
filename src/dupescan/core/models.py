"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for the duplicate scan: file records, duplicate groups,
run statistics and scan parameters.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Callable, Tuple
import time
from enum import Enum

from dupescan.utils.convert_utils import ConvertUtils


DEFAULT_MIN_SIZE = 30 * 1024 * 1024  # 30 MiB
DEFAULT_EXCLUDED_SUFFIXES: Tuple[str, ...] = (".git", ".terraform", "node_modules")


# =============================
# Enums
# =============================

class BucketMode(Enum):
    """
    Strategy used to find files that share their size with another file.
    """
    PAIRWISE = "pairwise"
    MAPPING = "mapping"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            BucketMode.PAIRWISE: "Pairwise scan",
            BucketMode.MAPPING: "Size mapping",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        mapping = {
            BucketMode.PAIRWISE:
                "Compare every file against the rest (quadratic, fine for small candidate sets)",
            BucketMode.MAPPING:
                "Single pass through a size → files mapping (linear)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmName(Enum):
    """Content checksum used to confirm duplicates."""
    XXH64 = "xxh64"
    CRC32 = "crc32"

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass
class File:
    """
    Represents a single file found by the walker.
    Size is read once at discovery time and never re-checked.
    """
    path: str
    size: int  # in bytes
    is_duplicate_candidate: bool = False
    content_hash: Optional[str] = None

    def mark_candidate(self) -> None:
        """Flag the file as sharing its size with another file. Never reset."""
        self.is_duplicate_candidate = True

    def set_hash(self, value: str) -> None:
        if self.content_hash is not None and self.content_hash != value:
            raise ValueError(f"Hash already recorded for {self.path}")
        self.content_hash = value

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    Files sharing one content checksum.
    All files in the group have the same size; the first one is the copy
    considered "kept" when computing wasted space.
    """
    checksum: str
    size: int
    files: List[File] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def wasted_space(self) -> int:
        """Bytes taken by the extra copies."""
        if self.duplicate_count < 2:
            return 0
        return self.size * (self.duplicate_count - 1)

    def add_file(self, file: File) -> None:
        if file.size != self.size:
            raise ValueError("Cannot add file with different size to a group.")
        self.files.append(file)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup checksum={self.checksum}, size={self.size}, count={len(self.files)}>"


class RunStats:
    """
    Counters collected over one scan.
    Owned by the caller and passed explicitly to every stage.
    """

    def __init__(self):
        self.start: float = time.time()
        self.elapsed: float = 0.0
        self.seen_files: int = 0
        self.filtered_files: int = 0
        self.duplicate_files: int = 0
        self.wasted_space: int = 0
        self.unreadable_files: int = 0
        self._timer_start: float = time.perf_counter()

    def mark_seen(self) -> None:
        self.seen_files += 1

    def set_filtered(self, count: int) -> None:
        self.filtered_files = count

    def mark_unreadable(self) -> None:
        self.unreadable_files += 1

    def record_groups(self, groups: Dict[str, DuplicateGroup]) -> None:
        """Set duplicate count and wasted space from the final groups."""
        self.duplicate_files = sum(g.duplicate_count for g in groups.values())
        self.wasted_space = sum(g.wasted_space for g in groups.values())

    def finish(self) -> None:
        self.elapsed = time.perf_counter() - self._timer_start

    def summary_lines(self, formatter: Optional[Callable[[int], str]] = None) -> List[str]:
        formatter = formatter or ConvertUtils.bytes_to_si
        lines = [
            f"Dedup took: {self.elapsed:.3f}s",
            f"Seen files count: {self.seen_files}",
            f"Checked files count: {self.filtered_files}",
            f"Duplicate files count: {self.duplicate_files}",
            f"Wasted space: {formatter(self.wasted_space)}",
        ]
        if self.unreadable_files:
            lines.append(f"Unreadable files skipped: {self.unreadable_files}")
        return lines

    def __repr__(self):
        return (f"<RunStats seen={self.seen_files}, filtered={self.filtered_files}, "
                f"duplicates={self.duplicate_files}, wasted={self.wasted_space}>")


"""
DTO for scan parameters with built-in validation.
"""

@dataclass
class ScanParams:
    """Parameters for one scan with validation."""
    root_dir: str
    min_size_bytes: int = DEFAULT_MIN_SIZE
    excluded_suffixes: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_SUFFIXES))
    bucket_mode: BucketMode = BucketMode.PAIRWISE
    algorithm: HashAlgorithmName = HashAlgorithmName.XXH64
    workers: int = 1

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

        if self.workers < 1:
            raise ValueError("Worker count must be at least 1")

        # Normalize suffixes: "node_modules/" and "/node_modules" both mean "node_modules"
        normalized = []
        for suffix in self.excluded_suffixes:
            suffix = suffix.strip().strip("/\\")
            if suffix and suffix not in normalized:
                normalized.append(suffix)
        self.excluded_suffixes = normalized

    @staticmethod
    def from_human_readable(
            root_dir: str,
            min_size_str: str,
            extra_excluded: Optional[List[str]] = None,
            bucket_mode: BucketMode = BucketMode.PAIRWISE,
            algorithm: HashAlgorithmName = HashAlgorithmName.XXH64,
            workers: int = 1,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Expands '~' in the root directory and appends extra exclusions
        to the default suffix list.
        """
        min_size = ConvertUtils.human_to_bytes(min_size_str)
        excluded = list(DEFAULT_EXCLUDED_SUFFIXES) + list(extra_excluded or [])

        return ScanParams(
            root_dir=ConvertUtils.expand_home(root_dir),
            min_size_bytes=min_size,
            excluded_suffixes=excluded,
            bucket_mode=bucket_mode,
            algorithm=algorithm,
            workers=workers,
        )
