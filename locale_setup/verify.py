#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  verify.py
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
"""Check /etc/default/locale after update-locale has run

The result is advisory only. Nothing here raises.
"""
from collections import namedtuple

from locale_setup.output import G, Y, BOLD, RESET, header

CONFIRMED = "confirmed"
MISMATCH = "mismatch"
ABSENT = "absent"

Verification = namedtuple("Verification", ["status", "actual"])


def read_lang(contents):
    """Return the value of the last LANG= line, or None"""
    lang = None
    for line in contents.split("\n"):
        line = line.strip()
        if line.startswith("LANG="):
            lang = line[5:].strip().strip("\"'")
    return lang


def verify_locale(expected, default_file="/etc/default/locale"):
    """Compare the persisted LANG with expected"""
    try:
        with open(default_file, "r", errors="replace") as default:
            contents = default.read()
    except OSError:
        return Verification(ABSENT, None)
    actual = read_lang(contents)
    if actual == expected:
        return Verification(CONFIRMED, actual)
    return Verification(MISMATCH, actual)


def report(verification, expected, default_file="/etc/default/locale"):
    """Print the verification result"""
    print("")
    header("VERIFICATION")
    if verification.status == ABSENT:
        print(Y + BOLD + "Warning: could not find or read %s." % (default_file) + RESET)
        return
    print("Checking %s . . ." % (default_file))
    try:
        with open(default_file, "r", errors="replace") as default:
            print(default.read().rstrip("\n"))
    except OSError:
        pass
    print("------")
    if verification.status == CONFIRMED:
        print(G + BOLD + "LANG in %s is set to %s." % (default_file, expected) + RESET)
    else:
        print(Y + BOLD + "Warning: LANG in %s is %s, expected %s. Please check it manually." % (default_file,
                                                                                               verification.actual,
                                                                                               expected) + RESET)
