"""
Unified command orchestrator for the duplicate scan.
This is the SINGLE source of truth for the scan workflow — used by the CLI and by library callers.
"""
from typing import Dict, List, Optional, Callable, Tuple
from dupescan.core.models import DuplicateGroup, RunStats, ScanParams, File
from dupescan.core.walker import TreeWalkerImpl
from dupescan.core.bucketer import SizeBucketerImpl
from dupescan.core.hasher import HasherImpl, ContentHashStage, algorithm_for
from dupescan.core.finder import DuplicateFinderImpl


class ScanCommand:
    """
    Orchestrates the entire scan:
    1. Start the run statistics
    2. Walk the tree with exclusions and the size threshold
    3. Find duplicates among the walked files

    Usage:
        params = ScanParams(root_dir="/data", min_size_bytes=1024 * 1024)
        command = ScanCommand()
        groups, stats = command.execute(params, progress_callback=cli_progress_printer)
    """

    def __init__(self):
        self._files: List[File] = []

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[Dict[str, DuplicateGroup], RunStats]:
        """
        Execute the scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (checksum → duplicate group, statistics)

        Raises:
            RuntimeError: If the root directory cannot be walked
        """
        stats = RunStats()

        walker = TreeWalkerImpl(
            root_dir=params.root_dir,
            min_size=params.min_size_bytes,
            excluded_suffixes=params.excluded_suffixes
        )
        self._files = walker.walk(stats, progress_callback=progress_callback)

        finder = DuplicateFinderImpl(
            bucketer=SizeBucketerImpl(params.bucket_mode),
            hash_stage=ContentHashStage(
                HasherImpl(algorithm_for(params.algorithm)),
                workers=params.workers
            )
        )
        groups = finder.find_duplicates(self._files, stats, progress_callback=progress_callback)

        return groups, stats

    def get_files(self) -> List[File]:
        """Get walked files after execution."""
        return self._files.copy()  # Return copy to prevent external mutation
