"""
Tests for size conversion and path helpers.
"""
import os
import pytest
from dupescan.utils.convert_utils import ConvertUtils


class TestBytesToSI:

    def test_small_values_are_plain_bytes(self):
        assert ConvertUtils.bytes_to_si(0) == "0 B"
        assert ConvertUtils.bytes_to_si(999) == "999 B"

    def test_decimal_units(self):
        assert ConvertUtils.bytes_to_si(1000) == "1.0 kB"
        assert ConvertUtils.bytes_to_si(1500) == "1.5 kB"
        assert ConvertUtils.bytes_to_si(1_000_000) == "1.0 MB"
        assert ConvertUtils.bytes_to_si(31_457_280) == "31.5 MB"
        assert ConvertUtils.bytes_to_si(2 * 10 ** 12) == "2.0 TB"


class TestBytesToIEC:

    def test_small_values_are_plain_bytes(self):
        assert ConvertUtils.bytes_to_iec(1023) == "1023 B"

    def test_binary_units(self):
        assert ConvertUtils.bytes_to_iec(1024) == "1.0 KiB"
        assert ConvertUtils.bytes_to_iec(1536) == "1.5 KiB"
        assert ConvertUtils.bytes_to_iec(30 * 1024 * 1024) == "30.0 MiB"
        assert ConvertUtils.bytes_to_iec(5 * 1024 ** 3) == "5.0 GiB"


class TestHumanToBytes:

    def test_plain_numbers(self):
        assert ConvertUtils.human_to_bytes("0") == 0
        assert ConvertUtils.human_to_bytes("31457280") == 31457280

    def test_units(self):
        assert ConvertUtils.human_to_bytes("1K") == 1024
        assert ConvertUtils.human_to_bytes("1KB") == 1024
        assert ConvertUtils.human_to_bytes("1KiB") == 1024
        assert ConvertUtils.human_to_bytes("30MiB") == 30 * 1024 * 1024
        assert ConvertUtils.human_to_bytes("1.5GB") == int(1.5 * 1024 ** 3)
        assert ConvertUtils.human_to_bytes("10B") == 10

    def test_case_and_whitespace(self):
        assert ConvertUtils.human_to_bytes(" 2mb ") == 2 * 1024 * 1024
        assert ConvertUtils.human_to_bytes("1 gib") == 1024 ** 3

    @pytest.mark.parametrize("value", ["", "abc", "-1", "-5MB", "1.2.3K", "infK", "-infG", "nanM"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            ConvertUtils.human_to_bytes(value)
        assert not ConvertUtils.is_valid_size_format(value)


class TestExpandHome:

    def test_tilde_slash(self):
        assert ConvertUtils.expand_home("~/data") == os.path.join(os.path.expanduser("~"), "data")

    def test_bare_tilde(self):
        assert ConvertUtils.expand_home("~") == os.path.expanduser("~")

    def test_other_paths_untouched(self):
        assert ConvertUtils.expand_home("/tmp/~x") == "/tmp/~x"
        assert ConvertUtils.expand_home("relative/dir") == "relative/dir"
        assert ConvertUtils.expand_home("~other/dir") == "~other/dir"
