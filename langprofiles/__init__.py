"""
langprofiles - N-gram language profiles for language identification

Load per-language n-gram frequency profiles and clean them of grams
written in scripts foreign to the language.

Example:
    from langprofiles import LanguageProfileReader, filter_all

    reader = LanguageProfileReader()
    profiles = filter_all(reader.read_all_builtin())
"""

__version__ = "0.3.0"

from langprofiles.filtering import filter_all, filter_to_dominant_script
from langprofiles.locale import LocaleTag
from langprofiles.models import FilterConfig, LanguageProfile, ReaderConfig
from langprofiles.reader import LanguageProfileReader, ProfileReadError
from langprofiles.scripts import MixedScriptError, Script, ScriptIntegrityError, dominant_script

__all__ = [
    "LanguageProfile",
    "LanguageProfileReader",
    "LocaleTag",
    "ReaderConfig",
    "FilterConfig",
    "Script",
    "ProfileReadError",
    "MixedScriptError",
    "ScriptIntegrityError",
    "dominant_script",
    "filter_to_dominant_script",
    "filter_all",
]
