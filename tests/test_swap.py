"""Tests for locale_setup.swap"""
import os

import pytest

from conftest import FakeRunner
from locale_setup.errors import SwapError
from locale_setup.swap import (SwapGuard, available_memory, needs_swap,
                               remove_stale_swap)


class AllocatingRunner(FakeRunner):
    """Creates the swap file when fallocate is called"""
    def __call__(self, args, output=None):
        result = super().__call__(args, output)
        if args[0] == "fallocate" and result.returncode == 0:
            open(args[-1], "w").close()
        return result


def meminfo(tmp_path, available):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal:        1000000 kB\nMemFree:          100000 kB\n"
                    "MemAvailable:    %8d kB\n" % (available))
    return str(path)


def test_acquire_and_release(tmp_path):
    swap_file = str(tmp_path / "swapfile_temp")
    runner = AllocatingRunner()
    with SwapGuard(swap_file, runner=runner) as guard:
        assert guard.active
        assert os.stat(swap_file).st_mode & 0o777 == 0o600
    assert runner.calls == [["fallocate", "-l", "1G", swap_file],
                            ["mkswap", swap_file],
                            ["swapon", swap_file],
                            ["swapoff", swap_file]]
    assert not os.path.exists(swap_file)


@pytest.mark.parametrize("failing", ["fallocate", "mkswap", "swapon"])
def test_failed_step_rolls_back(tmp_path, failing):
    swap_file = str(tmp_path / "swapfile_temp")
    runner = AllocatingRunner(failures={failing: 1})
    guard = SwapGuard(swap_file, runner=runner)
    with pytest.raises(SwapError):
        guard.acquire()
    assert not guard.active
    assert not os.path.exists(swap_file)
    assert "swapon" not in runner.commands() or failing == "swapon"


def test_release_missing_file_is_noop(tmp_path):
    runner = FakeRunner()
    SwapGuard(str(tmp_path / "gone"), runner=runner).release()
    assert runner.calls == []


def test_swapoff_failure_keeps_active_file(tmp_path):
    swap_file = str(tmp_path / "swapfile_temp")
    runner = AllocatingRunner(failures={"swapoff": 255})
    guard = SwapGuard(swap_file, runner=runner).acquire()
    guard.release()
    assert os.path.exists(swap_file)


def test_remove_stale_swap(tmp_path):
    swap_file = tmp_path / "swapfile_temp"
    swap_file.write_text("")
    runner = FakeRunner()
    assert remove_stale_swap(str(swap_file), runner=runner) is True
    assert runner.calls == [["swapoff", str(swap_file)]]
    assert not swap_file.exists()
    assert remove_stale_swap(str(swap_file), runner=runner) is False


def test_available_memory(tmp_path):
    assert available_memory(meminfo(tmp_path, 2048000)) == 2048000
    assert available_memory(str(tmp_path / "missing")) is None


def test_needs_swap(tmp_path):
    low = meminfo(tmp_path, 200000)
    assert needs_swap("auto", low) is True
    assert needs_swap("never", low) is False
    high = meminfo(tmp_path, 4000000)
    assert needs_swap("auto", high) is False
    assert needs_swap("always", high) is True
    assert needs_swap("auto", str(tmp_path / "missing")) is True
    with pytest.raises(ValueError):
        needs_swap("maybe", high)
