"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import math
import os


class ConvertUtils:
    @staticmethod
    def bytes_to_si(size_bytes: int) -> str:
        """
        Convert bytes to a decimal (1000-based) string, e.g. '31.5 MB'.
        Values below 1000 are printed as plain bytes: '999 B'.
        """
        unit = 1000
        if size_bytes < unit:
            return f"{size_bytes} B"
        div, exp = unit, 0
        n = size_bytes // unit
        while n >= unit:
            div *= unit
            exp += 1
            n //= unit
        return f"{size_bytes / div:.1f} {'kMGTPE'[exp]}B"

    @staticmethod
    def bytes_to_iec(size_bytes: int) -> str:
        """
        Convert bytes to a binary (1024-based) string, e.g. '30.0 MiB'.
        """
        unit = 1024
        if size_bytes < unit:
            return f"{size_bytes} B"
        div, exp = unit, 0
        n = size_bytes // unit
        while n >= unit:
            div *= unit
            exp += 1
            n //= unit
        return f"{size_bytes / div:.1f} {'KMGTPE'[exp]}iB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert human-readable size string to bytes.
        Supports formats: '30MiB', '1.5GB', '2048KB', '1000', '1K', '1M', '1G', etc.
        All multiples are binary (1K = 1024).
        Raises ValueError for negative sizes or invalid formats.
        """
        size_str = size_str.strip().upper()

        # Define units with full (KIB), short (KB) and letter (K) forms
        units = {
            'PIB': 1024 ** 5, 'PB': 1024 ** 5, 'P': 1024 ** 5,
            'TIB': 1024 ** 4, 'TB': 1024 ** 4, 'T': 1024 ** 4,
            'GIB': 1024 ** 3, 'GB': 1024 ** 3, 'G': 1024 ** 3,
            'MIB': 1024 ** 2, 'MB': 1024 ** 2, 'M': 1024 ** 2,
            'KIB': 1024, 'KB': 1024, 'K': 1024,
            'B': 1,
        }

        # Check for unit suffix (longest first to avoid 'KB' matching as 'K' + 'B')
        for unit in sorted(units.keys(), key=len, reverse=True):
            if size_str.endswith(unit):
                value_str = size_str[:-len(unit)].strip()
                try:
                    value = float(value_str)
                except ValueError:
                    raise ValueError(f"Invalid numeric value in size: '{value_str}'")

                if not math.isfinite(value):
                    raise ValueError(f"Size must be a finite number: '{size_str}'")
                if value < 0:
                    raise ValueError(f"Negative size not allowed: '{size_str}'")
                return int(value * units[unit])

        # No unit specified — treat as bytes
        try:
            value = int(size_str)
        except ValueError:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 30MiB, 1.5GB, 2048KB, 1000, 1K, 1M, etc."
            )

        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return value

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        """
        Check if the input string has a valid size format.
        """
        try:
            ConvertUtils.human_to_bytes(size_str)
            return True
        except ValueError:
            return False

    @staticmethod
    def expand_home(path: str) -> str:
        """Expand a leading '~' or '~/' to the current user's home directory."""
        if path == "~" or path.startswith("~/"):
            return os.path.expanduser(path)
        return path
