"""Tests for locale_setup.verify"""
from locale_setup.verify import (ABSENT, CONFIRMED, MISMATCH, read_lang,
                                 report, verify_locale)


def test_confirmed(tmp_path):
    default = tmp_path / "locale"
    default.write_text("LANG=zh_CN.UTF-8\n")
    assert verify_locale("zh_CN.UTF-8", str(default)) == (CONFIRMED,
                                                          "zh_CN.UTF-8")


def test_mismatch(tmp_path):
    default = tmp_path / "locale"
    default.write_text("LANG=en_US.UTF-8\nLANGUAGE=en_US:en\n")
    assert verify_locale("zh_TW.UTF-8", str(default)) == (MISMATCH,
                                                          "en_US.UTF-8")


def test_mismatch_without_lang(tmp_path):
    default = tmp_path / "locale"
    default.write_text("LC_ALL=C\n")
    assert verify_locale("zh_TW.UTF-8", str(default)) == (MISMATCH, None)


def test_absent(tmp_path):
    assert verify_locale("en_US.UTF-8",
                         str(tmp_path / "missing")).status == ABSENT


def test_read_lang_strips_quotes_and_takes_last():
    assert read_lang('#  File generated by update-locale\nLANG="en_US.UTF-8"\n') == "en_US.UTF-8"
    assert read_lang("LANG=C.UTF-8\nLANG=zh_CN.UTF-8\n") == "zh_CN.UTF-8"
    assert read_lang("LANGUAGE=zh_CN:zh\n") is None


def test_report_prints_result(tmp_path, console):
    default = tmp_path / "locale"
    default.write_text("LANG=en_US.UTF-8\n")
    report(verify_locale("zh_CN.UTF-8", str(default)), "zh_CN.UTF-8",
           str(default))
    out = console.readouterr().out
    assert "LANG=en_US.UTF-8" in out
    assert "expected zh_CN.UTF-8" in out


def test_invalid_bytes_do_not_break_verification(tmp_path, console):
    default = tmp_path / "locale"
    default.write_bytes(b"LANG=zh_CN.UTF-8\n# \xff\n")
    verification = verify_locale("zh_CN.UTF-8", str(default))
    assert verification == (CONFIRMED, "zh_CN.UTF-8")
    report(verification, "zh_CN.UTF-8", str(default))
    assert "LANG in %s is set to zh_CN.UTF-8" % (default) in console.readouterr().out
