#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  backup.py
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
"""Scoped backup and restore of the locale-generation manifest

BackupGuard restores the manifest from its backup on failure. With the
"always" policy it restores on every exit, leaving the system's manifest
unchanged once locale-gen has run.
"""
from os import path, remove
from shutil import copy2, move

from locale_setup.errors import BackupError
from locale_setup.output import warn

POLICIES = ("on-error", "always")


def default_backup_path(manifest):
    """Backups sit beside the manifest"""
    return manifest + ".backup"


class BackupGuard():
    """Own a copy of the manifest for the length of one operation"""
    def __init__(self, manifest, backup=None, policy="on-error"):
        if policy not in POLICIES:
            raise ValueError("Unknown restore policy: %s" % (policy))
        self.manifest = manifest
        self.backup = backup or default_backup_path(manifest)
        self.policy = policy
        self.acquired = False
        self.released = False

    def acquire(self):
        """Copy the manifest to the backup path"""
        print("Backing up %s to %s . . ." % (self.manifest, self.backup))
        try:
            copy2(self.manifest, self.backup)
        except OSError as error:
            raise BackupError("Could not back up %s: %s" % (self.manifest,
                                                             error))
        self.acquired = True
        return self

    def release(self, commit):
        """Restore or discard the backup. Only the first call does anything.

        Returns True if the manifest was restored.
        """
        if self.released or not self.acquired:
            return False
        self.released = True
        if commit and self.policy == "on-error":
            try:
                remove(self.backup)
            except FileNotFoundError:
                pass
            except OSError as error:
                warn("Could not remove backup %s: %s" % (self.backup, error))
                warn("Delete it by hand, or the next run will restore %s from it." % (self.manifest))
            return False
        return restore(self.manifest, self.backup)

    def __enter__(self):
        return self.acquire()

    def __exit__(self, exc_type, exc_value, traceback):
        self.release(exc_type is None)
        return False


def restore(manifest, backup):
    """Move backup over manifest

    Returns False without touching anything if the backup is gone.
    """
    if not path.exists(backup):
        warn("Backup %s is missing. %s was not restored." % (backup,
                                                             manifest))
        return False
    print("Restoring %s from backup . . ." % (manifest))
    try:
        move(backup, manifest)
    except OSError as error:
        raise BackupError("Could not restore %s from %s: %s" % (manifest,
                                                                 backup,
                                                                 error))
    return True


def recover_stale_backup(manifest, backup=None):
    """Restore a backup left behind by an interrupted run

    Returns True if one was found and restored.
    """
    backup = backup or default_backup_path(manifest)
    if not path.exists(backup):
        return False
    warn("Found %s from an interrupted run." % (backup))
    return restore(manifest, backup)
