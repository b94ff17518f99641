"""
Pytest configuration and shared fixtures for the procstats test suite.

This module provides a fake procfs tree, configuration fixtures and the
markers used across the test modules.
"""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Sample procfs content
# ============================================================================

SAMPLE_STAT = """\
cpu  4705 150 1120 16250 520 20 35 12 0 0
cpu0 2350 75 560 8125 260 10 17 6 0 0
cpu1 2355 75 560 8125 260 10 18 6 0 0
intr 114930548 113199788 3 0 5 263 0 4 [... lots more numbers ...]
ctxt 1990473
btime 1062191376
processes 2915
procs_running 1
procs_blocked 0
"""

SAMPLE_MEMINFO = """\
MemTotal:        2048000 kB
MemFree:          512000 kB
MemAvailable:    1024000 kB
Buffers:           64000 kB
Cached:           256000 kB
SwapCached:            0 kB
SwapTotal:       1000000 kB
SwapFree:         400000 kB
HugePages_Total:      10
HugePages_Free:        4
HugePages_Rsvd:        2
HugePages_Surp:        0
Hugepagesize:       2048 kB
"""

SAMPLE_CPUINFO = """\
processor\t: 0
vendor_id\t: GenuineIntel
cpu family\t: 6
model\t\t: 85
model name\t: Intel(R) Xeon(R) Platinum 8175M CPU @ 2.50GHz
stepping\t: 4
microcode\t: 0x2000064
cpu MHz\t\t: 2500.000
cache size\t: 33792 KB
physical id\t: 0
siblings\t: 2
core id\t\t: 0
cpu cores\t: 1
apicid\t\t: 0
initial apicid\t: 0
fpu\t\t: yes
fpu_exception\t: yes
cpuid level\t: 13
wp\t\t: yes
flags\t\t: fpu vme de pse tsc
bugs\t\t: cpu_meltdown spectre_v1
bogomips\t: 5000.00
clflush size\t: 64
cache_alignment\t: 64
address sizes\t: 46 bits physical, 48 bits virtual
power management:

processor\t: 1
vendor_id\t: GenuineIntel
cpu family\t: 6
model\t\t: 85
model name\t: Intel(R) Xeon(R) Platinum 8175M CPU @ 2.50GHz
physical id\t: 0
core id\t\t: 0
flags\t\t: fpu vme de pse tsc
address sizes\t: 46 bits physical, 48 bits virtual
"""

SAMPLE_LOADAVG = "0.52 0.58 0.59 2/415 12345\n"

SAMPLE_FILE_NR = "1024\t0\t9223372036854775807\n"

SAMPLE_PID = 4242

SAMPLE_LIMITS = """\
Limit                     Soft Limit           Hard Limit           Units
Max cpu time              unlimited            unlimited            seconds
Max file size             unlimited            unlimited            bytes
Max processes             63371                63371                processes
Max open files            1024                 4096                 files
Max locked memory         65536                65536                bytes
"""


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


class FakeProcfs:
    """A writable directory tree laid out like /proc."""

    def __init__(self, root: Path):
        self.root = root

    def write(self, relative_path: str, content: str) -> Path:
        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def remove(self, relative_path: str) -> None:
        path = self.root / relative_path
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()

    def add_fds(self, pid: int, count: int) -> None:
        fd_dir = self.root / str(pid) / "fd"
        fd_dir.mkdir(parents=True, exist_ok=True)
        for fd in range(count):
            (fd_dir / str(fd)).write_text("")


@pytest.fixture
def fake_procfs(temp_dir):
    """A procfs tree populated with realistic sample files."""
    procfs = FakeProcfs(temp_dir / "proc")
    procfs.write("stat", SAMPLE_STAT)
    procfs.write("meminfo", SAMPLE_MEMINFO)
    procfs.write("cpuinfo", SAMPLE_CPUINFO)
    procfs.write("loadavg", SAMPLE_LOADAVG)
    procfs.write("sys/fs/file-nr", SAMPLE_FILE_NR)
    procfs.write(f"{SAMPLE_PID}/limits", SAMPLE_LIMITS)
    procfs.add_fds(SAMPLE_PID, 5)
    return procfs


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def app_config(fake_procfs):
    """An AppConfig pointing at the fake procfs tree with a fast sampler."""
    from procstats.models.config import AppConfig, ProcfsConfig, SamplerConfig

    return AppConfig(
        procfs=ProcfsConfig(root=fake_procfs.root, clock_ticks=100),
        sampler=SamplerConfig(interval_seconds=0.02, overflow_policy="drop_new", stop_timeout=2.0),
    )


@pytest.fixture
def sample_config_data(fake_procfs):
    """Sample configuration data for testing."""
    return {
        "procfs": {
            "root": str(fake_procfs.root),
            "clock_ticks": 100,
        },
        "sampler": {
            "interval_seconds": 0.05,
            "overflow_policy": "replace",
            "stop_timeout": 1.0,
        },
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Write the sample configuration to a temporary config.toml."""
    import toml

    config_path = temp_dir / "config.toml"
    with open(config_path, "w") as f:
        toml.dump(sample_config_data, f)
    return config_path


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically reset the configuration singleton after each test."""
    yield

    from procstats.config import clear_config_cache, set_config_path

    original_config_path = Path(__file__).parent.parent / "conf" / "config.toml"
    clear_config_cache()
    set_config_path(original_config_path)
