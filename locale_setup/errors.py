#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  errors.py
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
"""Errors raised while changing the system locale

Everything derives from LocaleSetupError so change_locale.main() can catch
one type, print it and exit with status 1.
"""


class LocaleSetupError(Exception):
    """Base class for all fatal errors"""


class PrivilegeError(LocaleSetupError):
    """Not running as root"""


class ConfigError(LocaleSetupError):
    """Configuration file could not be read or parsed"""


class BackupError(LocaleSetupError):
    """Manifest backup could not be created or restored"""


class WriteError(LocaleSetupError):
    """Manifest could not be read or written"""


class SwapError(LocaleSetupError):
    """Temporary swap space could not be provisioned"""


class CommandError(LocaleSetupError):
    """An external command exited non-zero

    The CommandResult is kept on the exception so callers can inspect the
    exit code and captured stderr.
    """
    def __init__(self, message, result=None):
        self.result = result
        if result is not None and result.stderr:
            message = "%s\n%s" % (message, result.stderr.strip())
        super().__init__(message)


class RegenerationError(CommandError):
    """locale-gen failed"""


class DefaultUpdateError(CommandError):
    """update-locale failed"""
