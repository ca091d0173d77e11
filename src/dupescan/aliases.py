from dupescan.core.models import BucketMode, HashAlgorithmName

BUCKET_ALIASES = {
    "pairwise": BucketMode.PAIRWISE,
    "mapping": BucketMode.MAPPING,
}

BUCKET_CHOICES = list(BUCKET_ALIASES.keys())

BUCKET_HELP_TEXT = (
    "Strategy for finding files of equal size:\n"
    "  pairwise : Compare every file with the rest (default, fine for small sets)\n"
    "  mapping  : Single pass through a size table (for very large candidate sets)\n"
)

ALGORITHM_ALIASES = {
    "xxh64": HashAlgorithmName.XXH64,
    "xxhash": HashAlgorithmName.XXH64,
    "crc32": HashAlgorithmName.CRC32,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content checksum (not cryptographic):\n"
    "  xxh64 : xxHash64, 16 hex digits (default)\n"
    "  crc32 : CRC-32 IEEE, 8 hex digits\n"
)

EPILOG_TEXT = """
Examples:
  Basic usage - find duplicates larger than 30MiB in Downloads folder
  %(prog)s -d ~/Downloads

  Lower the size threshold and print groups as JSON
  %(prog)s -d ~/Downloads --minsize 1MB --json > duplicates.json

  Skip extra directories and hash with 4 threads
  %(prog)s -d /data --exclude venv build --workers 4

  .git, .terraform and node_modules directories are always skipped.
"""
