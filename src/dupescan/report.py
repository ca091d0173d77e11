"""
JSON rendering of scan results.
Output shape: {checksum: [{"path", "size", "sizehuman", "hash"}, ...], ...}
"""
import json
from typing import Dict, List, Any

from dupescan.core.models import DuplicateGroup, RunStats
from dupescan.utils.convert_utils import ConvertUtils


def groups_to_dict(groups: Dict[str, DuplicateGroup]) -> Dict[str, List[Dict[str, Any]]]:
    return {
        checksum: [
            {
                "path": f.path,
                "size": f.size,
                "sizehuman": ConvertUtils.bytes_to_si(f.size),
                "hash": f.content_hash,
            }
            for f in group.files
        ]
        for checksum, group in groups.items()
    }


def render_json(groups: Dict[str, DuplicateGroup], indent: int = 2) -> str:
    return json.dumps(groups_to_dict(groups), indent=indent)


def stats_to_dict(stats: RunStats) -> Dict[str, Any]:
    """Machine-readable counters of a finished run."""
    return {
        "elapsed": round(stats.elapsed, 6),
        "seen": stats.seen_files,
        "checked": stats.filtered_files,
        "duplicates": stats.duplicate_files,
        "wasted": stats.wasted_space,
        "unreadable": stats.unreadable_files,
    }
