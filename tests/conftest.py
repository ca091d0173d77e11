"""
Shared fixtures for duplicate scan tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 2 identical 1KB files + 1 more copy in a subdirectory
    - 2 identical 2KB files
    - 1 file of 2KB with different content (same size, not a duplicate)
    - 1 unique 1500B file
    - 1 empty file
    - a duplicate of the 1KB files hidden in node_modules (excluded)
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.bin"
    files["dup1_b"] = temp_dir / "dup1_b.bin"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size as pair #2, different content
    files["same_size_other"] = temp_dir / "other_2k.bin"
    files["same_size_other"].write_bytes(b"C" * 2048)

    # Unique size
    files["unique"] = temp_dir / "unique.bin"
    files["unique"].write_bytes(b"D" * 1500)

    # Empty file
    files["empty"] = temp_dir / "empty.bin"
    files["empty"].write_bytes(b"")

    # Subdirectory with a third copy of set #1
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.bin"
    files["sub_dup"].write_bytes(content_a)

    # Excluded directory with another copy of set #1
    node_modules = temp_dir / "project" / "node_modules"
    node_modules.mkdir(parents=True)
    files["excluded"] = node_modules / "dup_in_node_modules.bin"
    files["excluded"].write_bytes(content_a)

    return files
