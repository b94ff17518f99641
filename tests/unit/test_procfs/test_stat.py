"""
Unit tests for /proc/stat CPU accounting.
"""

import pytest

from procstats.models.records import CpuAccounting
from procstats.procfs.stat import get_boot_time, get_cpu, get_cpu_list, parse_cpu_stat


@pytest.mark.unit
class TestParseCpuStat:
    """Test cases for parse_cpu_stat."""

    def test_full_line(self):
        cpu = parse_cpu_stat("cpu  4705 150 1120 16250 520 20 35 12 0 0")
        assert cpu == CpuAccounting(
            user=4705, nice=150, sys=1120, idle=16250,
            wait=520, irq=20, soft_irq=35, stolen=12,
        )

    def test_short_line_leaves_missing_fields_zero(self):
        cpu = parse_cpu_stat("cpu 1 2 3 4")
        assert (cpu.user, cpu.nice, cpu.sys, cpu.idle) == (1, 2, 3, 4)
        assert cpu.wait == 0
        assert cpu.stolen == 0

    def test_bad_field_zero_others_kept(self):
        cpu = parse_cpu_stat("cpu 1 x 3 4 5 6 7 8")
        assert cpu.nice == 0
        assert cpu.sys == 3
        assert cpu.stolen == 8

    def test_total(self):
        cpu = CpuAccounting(user=1, nice=2, sys=3, idle=4, wait=5, irq=6, soft_irq=7, stolen=8)
        assert cpu.total() == 36

    def test_to_seconds(self):
        times = CpuAccounting(user=250, idle=100).to_seconds(100)
        assert times.user == 2.5
        assert times.idle == 1.0
        assert times.nice == 0.0


@pytest.mark.unit
class TestStatFile:
    """Test cases for the /proc/stat readers."""

    def test_get_cpu_reads_aggregate_line(self, fake_procfs):
        cpu = get_cpu(fake_procfs.root)
        assert cpu.user == 4705
        assert cpu.stolen == 12

    def test_get_cpu_without_aggregate_line(self, fake_procfs):
        fake_procfs.write("stat", "cpu0 1 2 3 4 5 6 7 8\n")
        assert get_cpu(fake_procfs.root) == CpuAccounting()

    def test_get_cpu_list_in_order(self, fake_procfs):
        cpu_list = get_cpu_list(fake_procfs.root)
        assert len(cpu_list.cpus) == 2
        assert cpu_list.cpus[0].user == 2350
        assert cpu_list.cpus[1].user == 2355
        assert cpu_list.cpus[1].soft_irq == 18

    def test_get_boot_time(self, fake_procfs):
        assert get_boot_time(fake_procfs.root) == 1062191376

    def test_get_boot_time_missing(self, fake_procfs):
        fake_procfs.write("stat", "cpu  1 2 3 4 5 6 7 8\n")
        assert get_boot_time(fake_procfs.root) == 0

    def test_missing_stat_raises(self, fake_procfs):
        fake_procfs.remove("stat")
        with pytest.raises(FileNotFoundError):
            get_cpu(fake_procfs.root)
