#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  menu.py
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
"""Numbered locale menu"""
from locale_setup.output import R, G, BOLD, RESET, eprint, header


def choose_locale(presets, input_func=None):
    """Ask which preset to use

    Returns the chosen preset, or None if the user picked the exit option.
    """
    if input_func is None:
        input_func = input
    header("LANGUAGE SETTINGS")
    exit_option = len(presets) + 1
    while True:
        print("Which system language do you want to use?")
        for number, preset in enumerate(presets, 1):
            print("[%s] %s (%s)" % (number, preset.display_name, preset.code))
        print("[%s] Exit" % (exit_option))
        try:
            answer = input_func(G + BOLD + "Option number: " + RESET).strip()
        except EOFError:
            print("")
            return None
        try:
            choice = int(answer)
        except ValueError:
            choice = 0
        if 1 <= choice <= len(presets):
            preset = presets[choice - 1]
            print("You chose: %s (%s)" % (preset.display_name, preset.code))
            return preset
        if choice == exit_option:
            return None
        eprint(R + "Not a valid option '%s'. Please try again." % (answer) + RESET)
