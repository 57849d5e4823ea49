#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  presets.py
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
"""Locale presets offered by change_locale"""
from collections import namedtuple

LocalePreset = namedtuple("LocalePreset", ["code", "display_name"])

PRESETS = (
    LocalePreset("en_US.UTF-8", "美式英语 (American English)"),
    LocalePreset("zh_TW.UTF-8", "台湾繁体中文 (Traditional Chinese, Taiwan)"),
    LocalePreset("zh_CN.UTF-8", "中国简体中文 (Simplified Chinese, China)"),
)


def find_preset(code, presets=PRESETS):
    """Return the preset for code, or None"""
    for each in presets:
        if each.code == code:
            return each
    return None
