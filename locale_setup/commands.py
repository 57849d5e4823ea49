#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  commands.py
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
"""Run locale-gen and update-locale"""
from collections import namedtuple
from subprocess import run, DEVNULL, PIPE

from locale_setup.errors import RegenerationError, DefaultUpdateError

CommandResult = namedtuple("CommandResult", ["args", "returncode", "stderr"])
STRATEGIES = ("system", "scoped")


def run_command(args, output=DEVNULL):
    """Run args to completion, capturing stderr

    stdout goes to output. A missing executable gives returncode 127 and one
    that can't be run gives 126, the same as a shell would.
    """
    try:
        process = run(args, stdout=output, stderr=PIPE)
    except FileNotFoundError as error:
        return CommandResult(args, 127, str(error))
    except OSError as error:
        return CommandResult(args, 126, str(error))
    return CommandResult(args, process.returncode,
                         process.stderr.decode(errors="replace"))


class LocaleApplier():
    """Regenerate locale data and persist the default locale"""
    def __init__(self, strategy="system", fallback=True, runner=run_command):
        if strategy not in STRATEGIES:
            raise ValueError("Unknown regeneration strategy: %s" % (strategy))
        self.strategy = strategy
        self.fallback = fallback
        self.runner = runner

    def regenerate(self, code):
        """Run locale-gen, for code only if the strategy is scoped"""
        if self.strategy == "scoped":
            print("Running locale-gen %s . . ." % (code))
            result = self.runner(["locale-gen", code])
            if result.returncode == 0:
                print("locale-gen succeeded.")
                return result
            if not self.fallback:
                raise RegenerationError("locale-gen %s failed (exit %s)" % (code,
                                                                            result.returncode),
                                        result)
            print("locale-gen %s failed. Retrying for all enabled locales . . ." % (code))
        else:
            print("Running locale-gen . . .")
        result = self.runner(["locale-gen"])
        if result.returncode != 0:
            raise RegenerationError("locale-gen failed (exit %s). Check the system logs." % (result.returncode),
                                    result)
        print("locale-gen succeeded.")
        return result

    def set_default(self, code):
        """Run update-locale LANG=code"""
        print("Running update-locale to set LANG to %s . . ." % (code))
        result = self.runner(["update-locale", "LANG=%s" % (code)])
        if result.returncode != 0:
            raise DefaultUpdateError("update-locale failed (exit %s)" % (result.returncode),
                                     result)
        print("update-locale succeeded.")
        return result
