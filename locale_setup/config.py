#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  config.py
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
"""Settings for change_locale

Defaults can be overridden with a JSON file. Bad values are reported and
replaced with the default, the same way a missing setting is. Unless BACKUP
is set, the backup sits beside MANIFEST.
"""
from os import path
from copy import deepcopy
import json

from locale_setup.backup import default_backup_path
from locale_setup.errors import ConfigError
from locale_setup.output import warn

CONFIG_FILE = "/etc/change-locale.json"

DEFAULTS = {"MANIFEST": "/etc/locale.gen",
            "BACKUP": None,
            "DEFAULT_LOCALE_FILE": "/etc/default/locale",
            "SWAP": "auto",
            "SWAP_FILE": "/tmp/swapfile_temp",
            "SWAP_SIZE": "1G",
            "REGENERATE": "system",
            "FALLBACK": True,
            "RESTORE": "on-error"}

CHOICES = {"SWAP": ("auto", "always", "never"),
           "REGENERATE": ("system", "scoped"),
           "RESTORE": ("on-error", "always")}


def _valid(key, value):
    """Check a single setting against its expected type"""
    if key in CHOICES:
        return value in CHOICES[key]
    if key == "FALLBACK":
        return isinstance(value, bool)
    if key == "BACKUP" and value is None:
        return True
    return isinstance(value, str) and value != ""


def _finish(settings):
    if settings["BACKUP"] is None:
        settings["BACKUP"] = default_backup_path(settings["MANIFEST"])
    return settings


def load_settings(config_file=None):
    """Return the settings dict, overlaying config_file on DEFAULTS

    When config_file is None the system config file is used if it exists.
    """
    settings = deepcopy(DEFAULTS)
    if config_file is None:
        if not path.isfile(CONFIG_FILE):
            return _finish(settings)
        config_file = CONFIG_FILE
    try:
        with open(config_file, "r") as conf:
            overrides = json.load(conf)
    except (OSError, ValueError) as error:
        raise ConfigError("Could not load config file %s: %s" % (config_file,
                                                                 error))
    if not isinstance(overrides, dict):
        raise ConfigError("Config file %s must hold a JSON object" % (config_file))
    for key, value in overrides.items():
        if key not in DEFAULTS:
            warn("Unknown setting %s in %s. Ignoring it." % (key, config_file))
        elif not _valid(key, value):
            warn("%s is not valid (%r). Defaulting to %r" % (key, value,
                                                           DEFAULTS[key]))
        else:
            settings[key] = value
    return _finish(settings)
