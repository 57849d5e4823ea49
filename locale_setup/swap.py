#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  swap.py
#
#  Copyright 2020 Thomas Castleman <contact@draugeros.org>
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; either version 2 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software
#  Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,
#  MA 02110-1301, USA.
#
#
"""Temporary swap space so locale-gen can run on low-memory hosts"""
from os import chmod, path, remove

from locale_setup.commands import run_command
from locale_setup.errors import SwapError
from locale_setup.output import warn

MEMINFO = "/proc/meminfo"
# kB, as reported by /proc/meminfo
LOW_MEMORY = 512 * 1024
MODES = ("auto", "always", "never")


def available_memory(meminfo=MEMINFO):
    """Return MemAvailable in kB, or None if it can't be read"""
    try:
        with open(meminfo, "r") as mem:
            for line in mem:
                if line.startswith("MemAvailable:"):
                    return int(line.split()[1])
    except (OSError, ValueError, IndexError):
        return None
    return None


def needs_swap(mode, meminfo=MEMINFO):
    """Decide whether to provision swap for this run"""
    if mode not in MODES:
        raise ValueError("Unknown swap mode: %s" % (mode))
    if mode == "always":
        return True
    if mode == "never":
        return False
    memory = available_memory(meminfo)
    return memory is None or memory < LOW_MEMORY


class SwapGuard():
    """Create and activate a swap file, then remove it again"""
    def __init__(self, swap_file="/tmp/swapfile_temp", size="1G",
                 runner=run_command):
        self.swap_file = swap_file
        self.size = size
        self.runner = runner
        self.active = False

    def _run(self, args, message):
        result = self.runner(args)
        if result.returncode != 0:
            self._rollback()
            raise SwapError("%s: %s" % (message, result.stderr.strip()))

    def _rollback(self):
        try:
            remove(self.swap_file)
        except FileNotFoundError:
            pass
        except OSError as error:
            warn("Could not remove %s: %s" % (self.swap_file, error))

    def acquire(self):
        """Allocate, format and enable the swap file"""
        print("Creating %s temporary swap file at %s . . ." % (self.size,
                                                              self.swap_file))
        self._run(["fallocate", "-l", self.size, self.swap_file],
                  "Could not create swap file. Make sure there is enough disk space")
        try:
            chmod(self.swap_file, 0o600)
        except OSError as error:
            self._rollback()
            raise SwapError("Could not set swap file permissions: %s" % (error))
        self._run(["mkswap", self.swap_file], "Could not format swap file")
        self._run(["swapon", self.swap_file], "Could not enable swap file")
        self.active = True
        print("Temporary swap file enabled.")
        return self

    def release(self):
        """Disable and delete the swap file. A missing file is fine."""
        if not path.exists(self.swap_file):
            self.active = False
            return
        print("Disabling and removing temporary swap file . . .")
        result = self.runner(["swapoff", self.swap_file])
        if result.returncode != 0 and self.active:
            warn("swapoff %s failed: %s" % (self.swap_file,
                                           result.stderr.strip()))
            return
        self.active = False
        self._rollback()

    def __enter__(self):
        return self.acquire()

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()
        return False


def remove_stale_swap(swap_file, runner=run_command):
    """Tear down a swap file left behind by an interrupted run"""
    if not path.exists(swap_file):
        return False
    warn("Found %s from an interrupted run." % (swap_file))
    SwapGuard(swap_file, runner=runner).release()
    return True
