"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Groups hashed files by content checksum and prunes single-file groups.
"""

from typing import List, Dict, Any, Callable
import logging

from dupescan.core.interfaces import DuplicateGrouper
from dupescan.core.models import File, DuplicateGroup

logger = logging.getLogger(__name__)


class DuplicateGrouperImpl(DuplicateGrouper):
    """
    Builds the checksum → DuplicateGroup mapping.
    Files without a recorded hash are ignored.
    """

    def group_by_hash(self, files: List[File]) -> Dict[str, DuplicateGroup]:
        """
        Groups files by content checksum, in the order they were hashed.
        Files are bucketed by (checksum, size), so a checksum collision between
        files of different size never splits a real duplicate set. The mapping
        key is the checksum, suffixed with "-<size>" only when one checksum
        survives for more than one size.
        """
        buckets = self._group_by(
            files, lambda f: None if f.content_hash is None else (f.content_hash, f.size))

        groups = []
        pruned = 0
        for (checksum, size), group_files in buckets.items():
            # Same size, different content: not a duplicate
            if len(group_files) < 2:
                pruned += 1
                continue
            group = DuplicateGroup(checksum=checksum, size=size)
            for file in group_files:
                group.add_file(file)
            groups.append(group)

        sizes_per_checksum: Dict[str, int] = {}
        for group in groups:
            sizes_per_checksum[group.checksum] = sizes_per_checksum.get(group.checksum, 0) + 1

        result = {}
        for group in groups:
            key = group.checksum
            if sizes_per_checksum[key] > 1:
                logger.warning(f"Checksum {key} shared by files of different size, keyed by size")
                key = f"{key}-{group.size}"
            result[key] = group

        logger.debug(f"Hash stage: {len(result)} duplicate groups, {pruned} singletons pruned")
        return result

    @staticmethod
    def _group_by(files: List[File], key_func: Callable[[File], Any]) -> Dict[Any, List[File]]:
        """
        Helper method to group files by any computed key, keeping first-seen order.
        Args:
            files: List of files to group
            key_func: Function that computes a hashable key from a File
        Returns:
            Dict[key, List[File]]
        """
        groups: Dict[Any, List[File]] = {}
        for file in files:
            key = key_func(file)
            if key is None:
                continue
            groups.setdefault(key, []).append(file)
        return groups
