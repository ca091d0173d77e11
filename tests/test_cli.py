"""
CLI tests — argument handling, exit codes, summary and JSON output.
"""
import json
import sys
from unittest import mock
import pytest
from dupescan.cli import CLIApplication, main
from dupescan.core.models import BucketMode, HashAlgorithmName, DEFAULT_MIN_SIZE


class TestArgumentParsing:

    def test_missing_dir_prints_usage_and_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            CLIApplication.parse_args([])
        assert exc.value.code == 1
        assert "usage:" in capsys.readouterr().err

    def test_defaults(self, temp_dir):
        args = CLIApplication.parse_args(["-d", str(temp_dir)])
        assert args.minsize == str(DEFAULT_MIN_SIZE)
        assert args.json is False
        assert args.exclude == []
        assert args.algorithm == "xxh64"
        assert args.bucket == "pairwise"
        assert args.workers == 1

    def test_create_params(self, temp_dir):
        app = CLIApplication()
        args = CLIApplication.parse_args([
            "-d", str(temp_dir), "--minsize", "1KB", "--exclude", "venv", "build",
            "--algorithm", "crc32", "--bucket", "mapping", "--workers", "3"])
        params = app.create_params(args)

        assert params.root_dir == str(temp_dir)
        assert params.min_size_bytes == 1024
        assert params.excluded_suffixes == [".git", ".terraform", "node_modules", "venv", "build"]
        assert params.algorithm == HashAlgorithmName.CRC32
        assert params.bucket_mode == BucketMode.MAPPING
        assert params.workers == 3

    def test_unknown_directory_exits(self, temp_dir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-d", str(temp_dir / "missing")])
        assert exc.value.code == 1
        assert "Directory not found" in capsys.readouterr().err

    def test_invalid_minsize_exits(self, temp_dir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-d", str(temp_dir), "--minsize", "huge"])
        assert exc.value.code == 1
        assert "Invalid size format" in capsys.readouterr().err

    def test_infinite_minsize_is_a_format_error(self, temp_dir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-d", str(temp_dir), "--minsize", "infK"])
        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert "Invalid size format" in err
        assert "Unexpected error" not in err

    def test_invalid_workers_exits(self, temp_dir):
        with pytest.raises(SystemExit) as exc:
            main(["-d", str(temp_dir), "--workers", "0"])
        assert exc.value.code == 1


class TestOutput:

    def test_summary_goes_to_stderr(self, test_files, temp_dir, capsys):
        main(["-d", str(temp_dir), "--minsize", "0"])
        captured = capsys.readouterr()

        assert captured.out == ""
        assert "Seen files count: 8" in captured.err
        assert "Checked files count: 7" in captured.err
        assert "Duplicate files count: 5" in captured.err
        assert "Wasted space: 4.1 kB" in captured.err

    def test_iec_units(self, test_files, temp_dir, capsys):
        main(["-d", str(temp_dir), "--minsize", "0", "--iec"])
        assert "Wasted space: 4.0 KiB" in capsys.readouterr().err

    def test_json_output(self, test_files, temp_dir, capsys):
        main(["-d", str(temp_dir), "--minsize", "0", "--json", "--quiet"])
        captured = capsys.readouterr()

        data = json.loads(captured.out)
        assert len(data) == 2
        for checksum, entries in data.items():
            assert len(entries) >= 2
            assert all(e["hash"] == checksum for e in entries)
            assert all(set(e) == {"path", "size", "sizehuman", "hash"} for e in entries)
        assert captured.err == ""

    def test_home_expansion(self, test_files, temp_dir, capsys):
        with mock.patch("os.path.expanduser", return_value=str(temp_dir)):
            main(["-d", "~", "--minsize", "0", "--json", "-q"])
        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_scan_failure_reports_error(self, temp_dir, capsys):
        with mock.patch("dupescan.cli.ScanCommand.execute", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc:
                main(["-d", str(temp_dir)])
        assert exc.value.code == 1
        assert "Scan failed: boom" in capsys.readouterr().err

    def test_keyboard_interrupt_exits_130(self, temp_dir):
        with mock.patch("dupescan.cli.ScanCommand.execute", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc:
                main(["-d", str(temp_dir)])
        assert exc.value.code == 130

    def test_verbose_shows_progress(self, test_files, temp_dir, capsys):
        main(["-d", str(temp_dir), "--minsize", "0", "-v"])
        err = capsys.readouterr().err
        assert "Scanning directory" in err
        assert "[Content Hash]" in err

    def test_entry_point_reads_sys_argv(self, test_files, temp_dir, capsys):
        with mock.patch.object(sys, "argv", ["dupescan", "-d", str(temp_dir), "--minsize", "0", "-q", "--json"]):
            main()
        assert len(json.loads(capsys.readouterr().out)) == 2
