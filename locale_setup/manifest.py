#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  manifest.py
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
"""Read, edit and write the locale-generation manifest (/etc/locale.gen)

Entries look like ``[#] <code> <charset>``, optionally followed by a
``# comment``. Editing only toggles the leading comment marker and may
append one missing entry; the rest of the file, including prose comments and
blank lines, is left untouched.
"""
from collections import namedtuple
import re

from locale_setup.errors import WriteError

CHARSET = "UTF-8"
ENTRY = re.compile(r"^\s*(#)?\s*([A-Za-z][\w.@-]*)\s+([\w-]+)\s*(?:#.*)?$")
COMMENT = re.compile(r"^\s*#\s*")

ManifestLine = namedtuple("ManifestLine", ["raw", "locale", "charset",
                                           "enabled"])


def parse_line(raw):
    """Parse one manifest line. Non-entries get locale None."""
    match = ENTRY.match(raw)
    if match is None:
        return ManifestLine(raw, None, None, False)
    return ManifestLine(raw, match.group(2), match.group(3),
                        match.group(1) is None)


def parse_manifest(contents):
    """Split manifest contents into ManifestLines"""
    return [parse_line(each) for each in _split(contents)[0]]


def _split(contents):
    """Return (lines, trailing newline?)"""
    if contents == "":
        return ([], True)
    lines = contents.split("\n")
    if lines[-1] == "":
        return (lines[:-1], True)
    return (lines, False)


def _enable(line):
    return COMMENT.sub("", line.raw, count=1)


def _disable(line):
    return "# " + line.raw.lstrip()


def edit_manifest(contents, target):
    """Return contents with only target's UTF-8 entry enabled

    Every other enabled entry is commented out. If target has no UTF-8 entry
    one is appended. Applying this twice gives the same result as once.
    """
    if target == "" or any(each.isspace() for each in target):
        raise ValueError("Not a valid locale code: %r" % (target))
    lines, trailing_newline = _split(contents)
    output = []
    found = False
    for raw in lines:
        line = parse_line(raw)
        if line.locale is None:
            output.append(raw)
        elif line.locale == target and line.charset == CHARSET and not found:
            found = True
            output.append(raw if line.enabled else _enable(line))
        elif line.enabled:
            output.append(_disable(line))
        else:
            output.append(raw)
    if not found:
        output.append("%s %s" % (target, CHARSET))
    output = "\n".join(output)
    if trailing_newline:
        output = output + "\n"
    return output


def read_manifest(manifest):
    """Read the manifest, raising WriteError if we can't"""
    try:
        with open(manifest, "r") as gen_file:
            return gen_file.read()
    except (OSError, ValueError) as error:
        raise WriteError("Could not read %s: %s" % (manifest, error))


def write_manifest(manifest, contents):
    """Write the manifest, raising WriteError if we can't"""
    try:
        with open(manifest, "w") as new_gen:
            new_gen.write(contents)
    except OSError as error:
        raise WriteError("Could not write %s: %s" % (manifest, error))


def update_manifest(manifest, target):
    """Edit the manifest file in place so only target is enabled"""
    contents = edit_manifest(read_manifest(manifest), target)
    write_manifest(manifest, contents)
    return contents
