"""Tests for the command-line interface."""

import argparse
import json

import pytest

from langprofiles.cli import load_settings, main
from langprofiles.locale import LocaleTag
from langprofiles.models import LanguageProfile
from langprofiles.reader import LanguageProfileReader, encode_profile


def _write(directory, profile):
    (directory / str(profile.locale)).write_bytes(encode_profile(profile))


class TestListAndInfo:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_list(self, capsys):
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "zh-CN" in out
        assert "ja" in out

    def test_info_builtin(self, capsys):
        assert main(["info", "ja"]) == 0
        out = capsys.readouterr().out
        assert "Profile: ja" in out
        assert "1-grams" in out
        assert "Han" in out

    def test_info_unknown_locale(self, capsys):
        assert main(["info", "xx"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_info_from_directory(self, tmp_path, capsys):
        _write(tmp_path, LanguageProfile(LocaleTag("en"), {1: {"a": 5, "b": 3}}))
        assert main(["info", "en", "-d", str(tmp_path)]) == 0
        assert "Latin: 2" in capsys.readouterr().out

    def test_info_prints_dominant_script(self, capsys):
        assert main(["info", "ru"]) == 0
        assert "Dominant script: Cyrillic" in capsys.readouterr().out

    def test_info_without_script_grams(self, tmp_path, capsys):
        _write(tmp_path, LanguageProfile(LocaleTag("en"), {1: {" ": 5, "1": 2}}))
        assert main(["info", "en", "-d", str(tmp_path)]) == 1
        assert "Error:" in capsys.readouterr().out


class TestCheck:
    def test_builtin_profiles(self, capsys):
        assert main(["check"]) == 0
        out = capsys.readouterr().out
        assert "ja: Han" in out
        assert "0 failed" in out

    def test_mixed_gram_fails(self, tmp_path, capsys):
        _write(tmp_path, LanguageProfile(LocaleTag("en"), {1: {"a": 1}, 2: {"aи": 1}}))
        assert main(["check", "-d", str(tmp_path)]) == 1
        assert "FAILED" in capsys.readouterr().out

    def test_show_foreign_grams(self, tmp_path, capsys):
        _write(tmp_path, LanguageProfile(LocaleTag("ru"), {1: {"о": 3, "е": 2, "z": 1}}))
        assert main(["check", "-d", str(tmp_path), "--show", "5"]) == 0
        out = capsys.readouterr().out
        assert "1 foreign grams" in out
        assert "'z'" in out

    def test_missing_directory(self, tmp_path, capsys):
        assert main(["check", "-d", str(tmp_path / "missing")]) == 1
        assert "No such folder" in capsys.readouterr().out


class TestClean:
    def test_writes_filtered_profiles(self, tmp_path, capsys):
        source = tmp_path / "raw"
        output = tmp_path / "clean"
        source.mkdir()
        _write(source, LanguageProfile(LocaleTag("ru"), {1: {"о": 3, "е": 2, "z": 1}}))
        _write(source, LanguageProfile(LocaleTag("ja"), {1: {"の": 4, "中": 2, "a": 10}}))

        assert main(["clean", str(source), "-o", str(output)]) == 0

        cleaned = LanguageProfileReader().read_from_directory(output)
        assert [str(p.locale) for p in cleaned] == ["ja", "ru"]
        assert cleaned[0].frequency("a") == 0
        assert cleaned[1].frequency("z") == 0
        assert "Wrote 2 profiles" in capsys.readouterr().out

    def test_mixed_gram_strict_fails(self, tmp_path, capsys):
        source = tmp_path / "raw"
        source.mkdir()
        _write(source, LanguageProfile(LocaleTag("en"), {1: {"a": 1}, 2: {"aи": 1}}))
        assert main(["clean", str(source), "-o", str(tmp_path / "out")]) == 1
        assert "Mixed scripts" in capsys.readouterr().out

    def test_mixed_gram_drop_policy(self, tmp_path):
        source = tmp_path / "raw"
        source.mkdir()
        _write(source, LanguageProfile(LocaleTag("en"), {1: {"a": 1}, 2: {"aи": 1}}))
        assert main(["clean", str(source), "-o", str(tmp_path / "out"), "--policy", "drop"]) == 0

    def test_policy_from_config_file(self, tmp_path):
        source = tmp_path / "raw"
        source.mkdir()
        _write(source, LanguageProfile(LocaleTag("en"), {1: {"a": 1}, 2: {"aи": 1}}))
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"filter": {"mixed_script_policy": "drop"}}), encoding="utf-8")
        assert main(["--config", str(config), "clean", str(source), "-o", str(tmp_path / "out")]) == 0

    def test_empty_source(self, tmp_path, capsys):
        assert main(["clean", str(tmp_path), "-o", str(tmp_path / "out")]) == 0
        assert "No profiles found" in capsys.readouterr().out

    def test_output_required(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["clean", str(tmp_path)])


class TestLoadSettings:
    def test_policy_flag_overrides_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"filter": {"mixed_script_policy": "drop"}}), encoding="utf-8")
        args = argparse.Namespace(config=str(config), policy="strict")
        _reader_config, filter_config = load_settings(args)
        assert filter_config.mixed_script_policy == "strict"

    def test_policy_flag_is_validated(self):
        args = argparse.Namespace(config=None, policy="lenient")
        with pytest.raises(ValueError, match="mixed_script_policy"):
            load_settings(args)

    def test_policy_flag_keeps_fold_languages(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"filter": {"fold_languages": ["ja", "ryu"]}}), encoding="utf-8")
        args = argparse.Namespace(config=str(config), policy="drop")
        _reader_config, filter_config = load_settings(args)
        assert filter_config.mixed_script_policy == "drop"
        assert list(filter_config.fold_languages) == ["ja", "ryu"]
