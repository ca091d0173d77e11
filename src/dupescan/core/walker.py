"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Implements directory walking for the duplicate scan.
Features:
- Recursively walks directories with os.walk
- Never descends into directories whose path ends with an excluded suffix
- Counts every file it tries to stat
- Keeps only files strictly larger than the minimum size
"""

import os
from typing import List, Optional, Callable, Iterable
from pathlib import Path
import time
import logging

logger = logging.getLogger(__name__)

# Local imports
from dupescan.core.models import File, RunStats, DEFAULT_EXCLUDED_SUFFIXES
from dupescan.core.interfaces import TreeWalker


class TreeWalkerImpl(TreeWalker):
    """
    Walks a directory tree and collects files above a size threshold.

    Attributes:
        root_dir: Root directory to walk
        min_size: Files must be strictly larger than this many bytes
        excluded_suffixes: Path suffixes (e.g. ".git") whose subtrees are skipped
    """

    def __init__(
        self,
        root_dir: str,
        min_size: int = 0,
        excluded_suffixes: Optional[Iterable[str]] = None
    ):
        self.root_dir = root_dir
        self.min_size = min_size
        if excluded_suffixes is None:
            excluded_suffixes = DEFAULT_EXCLUDED_SUFFIXES
        self.excluded_suffixes = [s.strip("/\\") for s in excluded_suffixes if s.strip("/\\")]

    def walk(self,
             stats: RunStats,
             progress_callback: Optional[Callable[[str, int, object], None]] = None) -> List[File]:
        """
        Single-pass walk. Increments stats.seen_files for every file it tries
        to stat and returns the files that pass the size filter.
        Raises RuntimeError if the root cannot be walked.
        """
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: min_size>{self.min_size}, excluded={self.excluded_suffixes}")

        found_files = []
        root_path = Path(self.root_dir)

        # Validate root directory exists and is accessible
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        if self._is_excluded(os.path.abspath(self.root_dir)):
            logger.debug(f"Root directory itself is excluded: {self.root_dir}")
            return found_files

        # Progress throttling: update every N files to reduce output overhead
        progress_interval = 5000
        progress_counter = 0
        root_str = os.path.abspath(str(root_path))

        def on_error(error: OSError) -> None:
            # A failure to list the root is fatal; anything deeper is skipped
            if os.path.abspath(error.filename or "") == root_str:
                raise RuntimeError(f"Cannot read directory {self.root_dir}: {error}") from error
            logger.debug(f"Skipping unreadable directory: {error.filename} ({error})")

        start_time = time.time()

        for root, dirs, files in os.walk(root_str, onerror=on_error):
            # Prune excluded subdirectories BEFORE os.walk enters them
            dirs[:] = [d for d in dirs if not self._is_excluded(os.path.join(root, d))]

            for filename in files:
                path = os.path.join(root, filename)
                if self._is_excluded(path):
                    logger.debug(f"Skipping excluded entry: {path}")
                    continue

                file_info = self._process_file(path, stats)
                if file_info:
                    found_files.append(file_info)
                progress_counter += 1

                if progress_callback and progress_counter >= progress_interval:
                    progress_callback('walking', stats.seen_files, None)
                    progress_counter = 0

        # Final update for small trees
        if progress_callback and progress_counter > 0:
            progress_callback('walking', stats.seen_files, None)

        logger.debug(f"Total walk time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Walk completed. Seen {stats.seen_files}, kept {len(found_files)} files.")

        return found_files

    def _is_excluded(self, path: str) -> bool:
        """True if path ends with a separator followed by an excluded suffix."""
        for suffix in self.excluded_suffixes:
            if path.endswith(os.sep + suffix) or path.endswith("/" + suffix):
                return True
        return False

    def _process_file(self, path: str, stats: RunStats) -> Optional[File]:
        """
        Stat a single file and return a File if it is larger than min_size.
        Stat failures are skipped silently.
        """
        stats.mark_seen()

        try:
            size = os.stat(path).st_size
        except OSError as e:
            logger.debug(f"Could not get size of {path}: {e}")
            return None

        if size <= self.min_size:
            return None

        return File(path=os.path.abspath(path), size=size)
