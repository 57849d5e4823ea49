"""Shared fixtures. No root, no real locale-gen."""
import json
import sys

import pytest

from locale_setup import output
from locale_setup.commands import CommandResult
from locale_setup.config import DEFAULTS

DEBIAN_MANIFEST = """# This file lists locales that you wish to have built. You can find a list
# of valid supported locales at /usr/share/i18n/SUPPORTED, and you can add
# user defined locales to /usr/local/share/i18n/SUPPORTED. If you change
# this file, you need to rerun locale-gen.
#

# aa_DJ ISO-8859-1
# en_GB.UTF-8 UTF-8
en_US.UTF-8 UTF-8
# zh_CN.GB2312 GB2312
# zh_CN.UTF-8 UTF-8
"""


class FakeRunner():
    """Stand-in for run_command that records every call

    failures maps a command tuple (or its first word) to a returncode.
    """
    def __init__(self, failures=None, default_file=None):
        self.calls = []
        self.failures = failures or {}
        self.default_file = default_file

    def __call__(self, args, output=None):
        self.calls.append(list(args))
        code = self.failures.get(tuple(args), self.failures.get(args[0], 0))
        if code != 0:
            return CommandResult(args, code, "%s: simulated failure\n" % (args[0]))
        if args[0] == "update-locale" and self.default_file is not None:
            with open(self.default_file, "w") as default:
                default.write("%s\n" % (args[1]))
        return CommandResult(args, 0, "")

    def commands(self):
        return [each[0] for each in self.calls]


@pytest.fixture
def manifest(tmp_path):
    gen = tmp_path / "locale.gen"
    gen.write_text(DEBIAN_MANIFEST)
    return gen


@pytest.fixture
def settings(tmp_path, manifest):
    conf = dict(DEFAULTS)
    conf.update({"MANIFEST": str(manifest),
                 "BACKUP": str(manifest) + ".backup",
                 "DEFAULT_LOCALE_FILE": str(tmp_path / "default_locale"),
                 "SWAP": "never",
                 "SWAP_FILE": str(tmp_path / "swapfile_temp")})
    return conf


@pytest.fixture
def config_file(tmp_path, settings):
    path = tmp_path / "change-locale.json"
    path.write_text(json.dumps(settings))
    return path


@pytest.fixture
def console(capsys, monkeypatch):
    """capsys that also sees eprint, which holds on to the stderr it imported"""
    class _CurrentStderr():
        """Resolve sys.stderr when written to, so capsys sees it during the test"""
        def __getattr__(self, name):
            return getattr(sys.stderr, name)

    monkeypatch.setattr(output, "stderr", _CurrentStderr())
    return capsys
