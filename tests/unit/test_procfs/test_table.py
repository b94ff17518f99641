"""
Unit tests for the key-value table parser.
"""

import pytest

from procstats.procfs.table import parse_meminfo, parse_table


@pytest.mark.unit
class TestParseTable:
    """Test cases for parse_table."""

    def test_kb_values_scaled_to_bytes(self, temp_dir):
        path = temp_dir / "meminfo"
        path.write_text("MemTotal:        1000 kB\nMemFree:          200 kB\n")

        table = parse_table(path)

        assert table == {"MemTotal": 1000 * 1024, "MemFree": 200 * 1024}

    def test_unitless_values_kept(self, temp_dir):
        path = temp_dir / "meminfo"
        path.write_text("HugePages_Total:      10\nHugePages_Free:        4\n")

        assert parse_table(path) == {"HugePages_Total": 10, "HugePages_Free": 4}

    def test_non_conforming_lines_ignored(self, temp_dir):
        path = temp_dir / "meminfo"
        path.write_text(
            "just some text\n"
            "\n"
            "MemTotal: 1000 kB\n"
            ": 12\n"
            "Bogus: lots kB\n"
            "Negative: -5\n"
        )

        assert parse_table(path) == {"MemTotal": 1000 * 1024}

    def test_missing_keys_absent_not_defaulted(self, temp_dir):
        path = temp_dir / "meminfo"
        path.write_text("MemTotal: 1000 kB\n")

        table = parse_table(path)

        assert "MemAvailable" not in table
        assert "Buffers" not in table

    def test_empty_file(self, temp_dir):
        path = temp_dir / "meminfo"
        path.write_text("")

        assert parse_table(path) == {}

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(OSError):
            parse_table(temp_dir / "nope")

    def test_parse_meminfo_reads_under_root(self, fake_procfs):
        table = parse_meminfo(fake_procfs.root)

        assert table["MemTotal"] == 2048000 * 1024
        assert table["Hugepagesize"] == 2048 * 1024
        assert table["HugePages_Total"] == 10
