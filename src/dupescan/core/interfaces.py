"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate scan.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- HashAlgorithm: Streaming checksum factory (xxHash64, CRC-32).
- Hasher: Computes the content checksum of a file.
- TreeWalker: Walks a directory tree and returns size-filtered files.
- SizeBucketer: Keeps only files that share their size with another file.
- DuplicateGrouper: Groups hashed files by checksum.
- DuplicateFinder: Runs bucket → hash → group and fills the run statistics.
"""

from typing import Protocol, List, Dict, Optional, Callable
from dupescan.core.models import File, DuplicateGroup, RunStats


# ===== Interfaces =====

class HashState(Protocol):
    """Incremental checksum state."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for streaming hash algorithms.

    Allows plugging in different checksum functions like xxHash64 or CRC-32
    without affecting the rest of the pipeline.
    """
    name: str

    def new(self) -> HashState:
        """Returns a fresh incremental state."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    def compute_hash(self, file: File) -> str: ...


class TreeWalker(Protocol):
    """
    Interface for walking file systems and collecting candidate files.
    """
    def walk(
        self,
        stats: RunStats,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[File]:
        """
        Walk the configured directory tree.

        Args:
            stats: Run statistics; the walker increments the seen counter.
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Files larger than the configured minimum size.
        """
        ...


class SizeBucketer(Protocol):
    """
    Interface for the first stage: dropping files with a unique size.
    """
    def find_candidates(self, files: List[File]) -> List[File]:
        """
        Returns every file whose size matches at least one other file,
        marking each of them as a duplicate candidate.
        """
        ...


class DuplicateGrouper(Protocol):
    """
    Interface for grouping hashed files by checksum.
    """
    def group_by_hash(self, files: List[File]) -> Dict[str, DuplicateGroup]:
        """Group files by content checksum, keeping only groups of 2+ files."""
        ...


class DuplicateFinder(Protocol):
    """
    Interface for the duplicate detection engine.

    Coordinates the stages (size → content hash → grouping) and
    fills in the run statistics.
    """
    def find_duplicates(
        self,
        files: List[File],
        stats: RunStats,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Dict[str, DuplicateGroup]:
        """
        Run the pipeline over the walker's output.

        Args:
            files: Size-filtered files produced by the walker.
            stats: Run statistics to update.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            Mapping of checksum to confirmed duplicate group.
        """
        ...
