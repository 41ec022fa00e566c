"""Tests for byte formatting and report rendering."""

import io

import pytest

from srcmetrics.aggregation import aggregate
from srcmetrics.models import FileMetrics, ScanConfig
from srcmetrics.output_generators import create_report, format_bytes, generate_report


class TestFormatBytes:
    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, "0.00 B"),
            (1023, "1023.00 B"),
            (1024, "1.00 KiB"),
            (1536, "1.50 KiB"),
            (1024**2 - 1, "1024.00 KiB"),
            (1024**2, "1.00 MiB"),
            (5 * 1024**3, "5.00 GiB"),
            (1024**4, "1.00 TiB"),
            (3 * 1024**5 // 2, "1.50 PiB"),
        ],
    )
    def test_units(self, size, expected):
        assert format_bytes(size) == expected

    def test_falls_back_to_raw_digits_above_pib(self):
        assert format_bytes(1024**6) == "1152921504606846976"
        assert format_bytes(1024**6 + 5) == str(1024**6 + 5)

    def test_width_pads_numeric_part(self):
        assert format_bytes(6, 8) == "    6.00 B"
        assert format_bytes(1024, 8) == "    1.00 KiB"


class TestGenerateReport:
    """Unit tests for generate_report()."""

    def _aggregate(self):
        return aggregate(
            [
                FileMetrics(3, 2, 2, 0, 0, "src/a.rs", 6),
                FileMetrics(2, 1, 0, 1, 0, "src/b.rs", 11),
            ]
        )

    def test_totals_block(self):
        lines = generate_report(self._aggregate()).splitlines()
        assert lines[0] == "semicolons         2"
        assert lines[1] == "newlines           3"
        assert lines[2] == "todos              1"
        assert lines[3] == "fixmes             0"
        assert lines[4] == "files              2 files   17.00 B"
        assert lines[5] == ""
        assert lines[6] == "lines              5"

    def test_extrema_block(self):
        lines = generate_report(self._aggregate()).splitlines()
        assert lines[7] == "smallest file      2 lines    6.00 B     src/b.rs"
        assert lines[8] == "largest file       3 lines   11.00 B     src/a.rs"
        assert lines[9] == "average            2 lines    8.00 B"
        assert len(lines) == 10

    def test_empty_dataset_report(self):
        report = generate_report(aggregate([]))
        lines = report.splitlines()
        assert lines[4] == "files              0 files    0.00 B"
        assert lines[6] == "lines              0"
        assert lines[7] == "no files found"
        assert report.endswith("\n")


class TestCreateReport:
    """Integration tests for create_report()."""

    def test_writes_report_and_returns_aggregate(self, rs_tree):
        out = io.StringIO()
        config = ScanConfig(paths=[rs_tree], extensions=["rs"], progress=False)
        agg = create_report(config, out)
        assert agg.total_files == 2
        assert out.getvalue() == generate_report(agg)

    def test_exclude_patterns_applied(self, make_tree):
        root = make_tree({"a.rs": "x;", "vendor/b.rs": "y;z;"})
        config = ScanConfig(
            paths=[root], extensions=["rs"], exclude=["vendor/"], progress=False
        )
        agg = create_report(config, io.StringIO())
        assert agg.total_files == 1
        assert agg.total_semicolons == 1

    def test_verbose_logs_to_stderr(self, rs_tree, capsys):
        config = ScanConfig(paths=[rs_tree], extensions=["rs"], verbose=True, progress=False)
        out = io.StringIO()
        create_report(config, out)
        captured = capsys.readouterr()
        assert "Found 2 files" in captured.err
        assert "a.rs (3 lines, 6.00 B)" in captured.err
        assert captured.out == ""

    def test_missing_directory_exits(self, tmp_path, capsys):
        config = ScanConfig(paths=[tmp_path / "nope"], extensions=["rs"], progress=False)
        out = io.StringIO()
        with pytest.raises(SystemExit) as exc_info:
            create_report(config, out)
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
        assert out.getvalue() == ""

    def test_undecodable_file_exits(self, make_tree, capsys):
        root = make_tree({"bad.rs": b"\xff\xfe"})
        config = ScanConfig(paths=[root], extensions=["rs"], progress=False)
        out = io.StringIO()
        with pytest.raises(SystemExit) as exc_info:
            create_report(config, out)
        assert exc_info.value.code == 1
        assert "bad.rs" in capsys.readouterr().err
        assert out.getvalue() == ""
