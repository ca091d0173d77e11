"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/bucketer.py
First pipeline stage: find files whose size matches at least one other file.
Files with a unique size cannot be duplicates and never get hashed.

Two strategies give the same result:
- PAIRWISE: compares each unmarked file with the rest of the list (O(n²))
- MAPPING: one pass through a size → files mapping (O(n))
"""

from typing import List, Dict
from collections import defaultdict
import logging

from dupescan.core.interfaces import SizeBucketer
from dupescan.core.models import File, BucketMode

logger = logging.getLogger(__name__)


class SizeBucketerImpl(SizeBucketer):
    """
    Marks size-duplicate candidates and returns them.
    Output is ordered by descending size; files of one size keep discovery order.
    """

    def __init__(self, mode: BucketMode = BucketMode.PAIRWISE):
        self.mode = mode

    def find_candidates(self, files: List[File]) -> List[File]:
        # Stable sort: equal sizes keep walk order
        ordered = sorted(files, key=lambda f: f.size, reverse=True)

        if self.mode == BucketMode.MAPPING:
            candidates = self._by_mapping(ordered)
        else:
            candidates = self._pairwise(ordered)

        logger.debug(f"Size stage ({self.mode.value}): {len(candidates)} of {len(files)} files share a size")
        return candidates

    @staticmethod
    def _pairwise(files: List[File]) -> List[File]:
        candidates = []
        count = len(files)
        for i in range(count):
            check_file = files[i]
            if check_file.is_duplicate_candidate:
                continue

            matches = []
            for j in range(i + 1, count):
                other = files[j]
                if other.is_duplicate_candidate:
                    continue
                if other.size == check_file.size:
                    other.mark_candidate()
                    matches.append(other)

            if matches:
                check_file.mark_candidate()
                candidates.append(check_file)
                candidates.extend(matches)
        return candidates

    @staticmethod
    def _by_mapping(files: List[File]) -> List[File]:
        by_size: Dict[int, List[File]] = defaultdict(list)
        for file in files:
            by_size[file.size].append(file)

        candidates = []
        # dict keeps insertion order, so sizes stay in descending order
        for same_size in by_size.values():
            if len(same_size) < 2:
                continue
            for file in same_size:
                file.mark_candidate()
            candidates.extend(same_size)
        return candidates
