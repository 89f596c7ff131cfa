"""Tests for core data models."""

import json

import pytest

from langprofiles.locale import LocaleTag
from langprofiles.models import FilterConfig, LanguageProfile, ReaderConfig, load_config


def _profile() -> LanguageProfile:
    return LanguageProfile(
        locale=LocaleTag("en"),
        grams={
            1: {"a": 5, "b": 3},
            2: {"ab": 2, " a": 7, "ba": 1},
            3: {},
        },
    )


class TestLanguageProfile:
    """Tests for LanguageProfile."""

    def test_gram_lengths_sorted(self):
        profile = LanguageProfile(LocaleTag("en"), {3: {}, 1: {"a": 1}, 2: {}})
        assert profile.gram_lengths == [1, 2, 3]

    def test_empty_length_is_kept(self):
        profile = _profile()
        assert 3 in profile.gram_lengths
        assert profile.num_grams(3) == 0

    def test_frequency(self):
        profile = _profile()
        assert profile.frequency("a") == 5
        assert profile.frequency(" a") == 7
        assert profile.frequency("z") == 0
        assert profile.frequency("abcd") == 0

    def test_counts(self):
        profile = _profile()
        assert profile.num_grams() == 5
        assert profile.num_grams(2) == 3
        assert profile.num_gram_occurrences(2) == 10
        assert profile.min_gram_count(2) == 1
        assert profile.max_gram_count(2) == 7
        assert profile.min_gram_count(3) == 0
        assert profile.max_gram_count(3) == 0

    def test_unconfigured_length_raises(self):
        with pytest.raises(KeyError):
            _profile().num_grams(4)

    def test_iter_grams_shortest_first(self):
        grams = [g for g, _ in _profile().iter_grams()]
        assert grams == ["a", "b", "ab", " a", "ba"]

    def test_iter_grams_single_length(self):
        assert dict(_profile().iter_grams(1)) == {"a": 5, "b": 3}

    def test_accepts_locale_string(self):
        profile = LanguageProfile("zh-CN", {1: {"中": 1}})
        assert profile.locale == LocaleTag("zh", region="CN")

    def test_immutable(self):
        profile = _profile()
        with pytest.raises(TypeError):
            profile.grams[1]["c"] = 1
        with pytest.raises(TypeError):
            profile.grams[4] = {}
        with pytest.raises(AttributeError):
            profile.locale = LocaleTag("fr")

    def test_source_mapping_is_copied(self):
        source = {1: {"a": 1}}
        profile = LanguageProfile(LocaleTag("en"), source)
        source[1]["b"] = 2
        assert profile.frequency("b") == 0

    def test_equality(self):
        assert _profile() == _profile()
        other = LanguageProfile(LocaleTag("en"), {1: {"a": 5}})
        assert _profile() != other

    def test_hashable(self):
        assert hash(_profile()) == hash(_profile())

    @pytest.mark.parametrize("grams", [
        {0: {}},
        {-1: {}},
        {1: {"ab": 1}},
        {2: {"a": 1}},
        {1: {"a": -1}},
        {1: {"a": 1.5}},
        {1: {"a": 1}, "2": {"ab": 1}},
        {1: {"a": 1}, None: {}},
    ])
    def test_invalid_grams_raise(self, grams):
        with pytest.raises(ValueError):
            LanguageProfile(LocaleTag("en"), grams)


class TestFilterConfig:
    """Tests for FilterConfig."""

    def test_defaults(self):
        config = FilterConfig()
        assert config.fold_languages == ("ja",)
        assert config.mixed_script_policy == "strict"

    def test_folds_japanese_only(self):
        config = FilterConfig()
        assert config.folds(LocaleTag("ja"))
        assert config.folds(LocaleTag("ja", region="JP"))
        assert not config.folds(LocaleTag("zh", region="CN"))

    def test_unknown_policy_raises(self):
        with pytest.raises(ValueError, match="mixed_script_policy"):
            FilterConfig(mixed_script_policy="lenient")

    def test_roundtrip(self):
        config = FilterConfig(fold_languages=("ja", "ryu"), mixed_script_policy="drop")
        restored = FilterConfig.from_dict(config.to_dict())
        assert restored == config

    def test_from_dict_missing_keys_defaults(self):
        assert FilterConfig.from_dict({}) == FilterConfig()


class TestReaderConfig:
    """Tests for ReaderConfig."""

    def test_defaults(self):
        config = ReaderConfig()
        assert config.profile_directory == "languages"
        assert config.package == "langprofiles"
        assert config.encoding == "utf-8"

    def test_from_dict_missing_keys_defaults(self):
        assert ReaderConfig.from_dict({"encoding": "utf-8"}) == ReaderConfig()


class TestLoadConfig:
    def test_load_sections(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "reader": {"profile_directory": "profiles"},
            "filter": {"mixed_script_policy": "drop"},
        }), encoding="utf-8")
        reader_config, filter_config = load_config(path)
        assert reader_config.profile_directory == "profiles"
        assert filter_config.mixed_script_policy == "drop"
        assert filter_config.fold_languages == ("ja",)

    def test_empty_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{}", encoding="utf-8")
        assert load_config(path) == (ReaderConfig(), FilterConfig())

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")
