#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  set_locale.py
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
"""Set system locale to one of the presets"""
from subprocess import DEVNULL
from contextlib import ExitStack

from locale_setup.backup import BackupGuard
from locale_setup.commands import LocaleApplier, run_command
from locale_setup.manifest import update_manifest
from locale_setup.swap import SwapGuard, needs_swap
from locale_setup.verify import verify_locale


def set_locale(preset, settings, output=DEVNULL, runner=None):
    """Handle setting locale for a given preset

    Backs up the manifest, optionally adds swap, enables only preset.code in
    the manifest, runs locale-gen and update-locale, then checks the result.
    The backup and swap are released on every exit path, swap first.
    Returns the Verification.
    """
    if runner is None:
        def runner(args):
            return run_command(args, output=output)
    print("Preparing to set system language to %s (%s) . . ." % (preset.display_name,
                                                                 preset.code))
    applier = LocaleApplier(settings["REGENERATE"], settings["FALLBACK"],
                            runner=runner)
    with ExitStack() as stack:
        stack.enter_context(BackupGuard(settings["MANIFEST"],
                                        settings["BACKUP"],
                                        settings["RESTORE"]))
        if needs_swap(settings["SWAP"]):
            stack.enter_context(SwapGuard(settings["SWAP_FILE"],
                                          settings["SWAP_SIZE"],
                                          runner=runner))
        print("Enabling only %s in %s . . ." % (preset.code,
                                                 settings["MANIFEST"]))
        update_manifest(settings["MANIFEST"], preset.code)
        applier.regenerate(preset.code)
        applier.set_default(preset.code)
        verification = verify_locale(preset.code,
                                     settings["DEFAULT_LOCALE_FILE"])
    print("System language set to %s (%s)." % (preset.display_name,
                                                preset.code))
    return verification
