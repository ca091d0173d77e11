"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming content hashing using the File class and pluggable hash algorithms.

HasherImpl reads each file in fixed-size chunks so memory use does not grow
with file size, and stores the hex digest on the File record.
ContentHashStage runs the hasher over all size-duplicate candidates,
sequentially or with a thread pool, and drops files that cannot be read.
"""

import zlib
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Callable, Tuple

import xxhash

from dupescan.core.models import File, RunStats, HashAlgorithmName
from dupescan.core.interfaces import Hasher, HashAlgorithm, HashState

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 1024 * 1024  # 1 MiB


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh64"

    def new(self) -> HashState:
        return xxhash.xxh64()


class _Crc32State:
    """Incremental CRC-32 (IEEE polynomial) with a hashlib-like interface."""

    def __init__(self):
        self._value = 0

    def update(self, data: bytes) -> None:
        self._value = zlib.crc32(data, self._value)

    def hexdigest(self) -> str:
        return f"{self._value & 0xFFFFFFFF:08x}"


class Crc32AlgorithmImpl(HashAlgorithm):
    name = "crc32"

    def new(self) -> HashState:
        return _Crc32State()


ALGORITHMS = {
    HashAlgorithmName.XXH64: XXHashAlgorithmImpl,
    HashAlgorithmName.CRC32: Crc32AlgorithmImpl,
}


def algorithm_for(name: HashAlgorithmName) -> HashAlgorithm:
    """Returns a fresh algorithm instance for the given enum value."""
    return ALGORITHMS[name]()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Computes and caches the full-content hash of a file.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, chunk_size: int = READ_CHUNK_SIZE):
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_hash(self, file: File) -> str:
        """
        Streams the whole file through the checksum and records the hex digest.
        Raises OSError if the file cannot be opened or read.
        """
        if file.content_hash is not None:
            return file.content_hash

        state = self.algorithm.new()
        with open(file.path, 'rb') as f:
            while True:
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                state.update(chunk)

        digest = state.hexdigest()
        file.set_hash(digest)
        return digest


class ContentHashStage:
    """
    Hashes every size-duplicate candidate.

    Files that fail to open or read are logged, counted as unreadable and
    dropped; the remaining files are returned in input order whatever the
    worker count.
    """

    def __init__(self, hasher: Optional[Hasher] = None, workers: int = 1):
        if workers < 1:
            raise ValueError("Worker count must be at least 1")
        self.hasher = hasher or HasherImpl()
        self.workers = workers

    def get_stage_name(self) -> str:
        return "Content Hash"

    def process(
            self,
            candidates: List[File],
            stats: RunStats,
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[File]:
        total_files = len(candidates)
        if not candidates:
            return []

        if self.workers > 1 and total_files > 1:
            # Workers only compute; results are merged below in input order
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                results = executor.map(self._safe_hash, candidates)
                outcomes = self._collect(results, total_files, progress_callback)
        else:
            results = (self._safe_hash(f) for f in candidates)
            outcomes = self._collect(results, total_files, progress_callback)

        hashed = []
        for file, error in outcomes:
            if error is not None:
                logger.warning(f"Skipping {file.path}: {error}")
                stats.mark_unreadable()
                continue
            hashed.append(file)

        if len(hashed) < total_files:
            logger.warning(f"Skipped {total_files - len(hashed)} files due to read errors")

        return hashed

    def _collect(self, results, total_files, progress_callback) -> List[Tuple[File, Optional[OSError]]]:
        outcomes = []
        for processed, outcome in enumerate(results, 1):
            outcomes.append(outcome)
            if progress_callback:
                progress_callback(self.get_stage_name(), processed, total_files)
        return outcomes

    def _safe_hash(self, file: File) -> Tuple[File, Optional[OSError]]:
        try:
            self.hasher.compute_hash(file)
            return file, None
        except OSError as e:
            return file, e
