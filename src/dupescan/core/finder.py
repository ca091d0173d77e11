"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

finder.py
Implements the duplicate detection pipeline over the walker's output:
    size bucketing → content hashing → grouping by checksum
Each stage only reads what the previous stage produced.
"""
import time
import logging
from typing import List, Dict, Optional, Callable

from dupescan.core.models import File, DuplicateGroup, RunStats
from dupescan.core.bucketer import SizeBucketerImpl
from dupescan.core.hasher import ContentHashStage
from dupescan.core.grouper import DuplicateGrouperImpl
from dupescan.core.interfaces import DuplicateFinder, SizeBucketer, DuplicateGrouper

logger = logging.getLogger(__name__)


# =============================
# Main Finder Class
# =============================
class DuplicateFinderImpl(DuplicateFinder):
    """
    Runs the two-stage duplicate detection and fills RunStats.
    Stages are injected so each can be swapped or tested alone.
    """
    def __init__(
        self,
        bucketer: Optional[SizeBucketer] = None,
        hash_stage: Optional[ContentHashStage] = None,
        grouper: Optional[DuplicateGrouper] = None
    ):
        self.bucketer = bucketer or SizeBucketerImpl()
        self.hash_stage = hash_stage or ContentHashStage()
        self.grouper = grouper or DuplicateGrouperImpl()

    def find_duplicates(
        self,
        files: List[File],
        stats: RunStats,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Dict[str, DuplicateGroup]:
        """
        Main pipeline.
        Args:
            files: Size-filtered files from the walker
            stats: Run statistics, updated in place
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports progress per stage.
        Returns:
            Dict[str, DuplicateGroup] keyed by checksum, in hashing order
        """
        stats.set_filtered(len(files))

        # Stage 1: size
        start_time = time.time()
        candidates = self.bucketer.find_candidates(files)
        if progress_callback:
            progress_callback("Size grouping", len(files), len(files))
        logger.debug(f"Size stage: {len(candidates)} candidates in {time.time() - start_time:.3f}s")

        # Stage 2: content hash
        start_time = time.time()
        hashed = self.hash_stage.process(candidates, stats, progress_callback=progress_callback)
        logger.debug(f"Hash stage: {len(hashed)} files hashed in {time.time() - start_time:.3f}s")

        # Stage 3: group and prune
        groups = self.grouper.group_by_hash(hashed)

        stats.record_groups(groups)
        stats.finish()
        return groups
