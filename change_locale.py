#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  change_locale.py
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
"""Change the system locale on Debian-based systems to one of a few presets"""
from os import getuid
from subprocess import DEVNULL
from sys import argv, stderr
from sys import exit as leave

from locale_setup.backup import recover_stale_backup
from locale_setup.config import load_settings
from locale_setup.errors import LocaleSetupError, PrivilegeError
from locale_setup.menu import choose_locale
from locale_setup.output import R, G, Y, BOLD, RESET, eprint
from locale_setup.presets import PRESETS
from locale_setup.set_locale import set_locale
from locale_setup.swap import remove_stale_swap
from locale_setup.verify import report

VERSION = "0.0.1-alpha1"
HELP = """change_locale.py, Version %s
\t-c, --config PATH\tRead settings from PATH (JSON)
\t-d, --debug\t\tShow output from locale-gen and friends
\t-h, --help\t\tPrint this help dialog and exit.
\t-v, --version\t\tPrint current version and exit.

Simply run this program without any arguments and it will handle the rest.""" % (VERSION)


def check_root():
    """Make sure we are running as root"""
    if getuid() != 0:
        raise PrivilegeError("change_locale.py needs root privileges. Run it with 'sudo %s' or as root." % (argv[0]))


def recover(settings):
    """Undo anything an interrupted run left behind"""
    remove_stale_swap(settings["SWAP_FILE"])
    if recover_stale_backup(settings["MANIFEST"], settings["BACKUP"]):
        print("%s restored." % (settings["MANIFEST"]))


def run(settings, output=DEVNULL, input_func=None):
    """Do the thing"""
    recover(settings)
    preset = choose_locale(PRESETS, input_func=input_func)
    if preset is None:
        print("Cancelled. Exiting . . .")
        return 0
    print("")
    verification = set_locale(preset, settings, output=output)
    report(verification, preset.code, settings["DEFAULT_LOCALE_FILE"])
    print("")
    print(Y + BOLD + "Log out and back in, or reboot, for the change to take full effect." + RESET)
    print(G + BOLD + "LOCALE CHANGE COMPLETE!" + RESET)
    return 0


def main(args=None):
    """Parse flags and run, returning the exit status"""
    if args is None:
        args = argv[1:]
    output = DEVNULL
    config_file = None
    index = 0
    while index < len(args):
        if args[index] in ("-h", "--help"):
            print(HELP)
            return 0
        elif args[index] in ("-v", "--version"):
            print(VERSION)
            return 0
        elif args[index] in ("-d", "--debug"):
            output = stderr.buffer
        elif args[index] in ("-c", "--config"):
            if index + 1 >= len(args):
                eprint(R + BOLD + "Option %s needs a path to a config file" % (args[index]) + RESET)
                return 1
            index += 1
            config_file = args[index]
        else:
            eprint(R + BOLD + "Unknown option: %s" % (args[index]) + RESET)
            eprint(HELP)
            return 1
        index += 1
    try:
        check_root()
        settings = load_settings(config_file)
        return run(settings, output=output)
    except LocaleSetupError as error:
        eprint(R + BOLD + "ERROR: " + str(error) + RESET)
        return 1
    except KeyboardInterrupt:
        eprint(R + BOLD + "\nInterrupted." + RESET)
        return 1


if __name__ == '__main__':
    leave(main())
