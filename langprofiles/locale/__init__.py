"""
Locale tags and the registry of built-in locales.

Each profile is keyed by a locale tag; the tag string is also the
name of the profile file on disk.
"""

from langprofiles.locale.builtin import builtin_locales, get_locale, is_builtin
from langprofiles.locale.tag import LocaleTag, LocaleTagError

__all__ = ["LocaleTag", "LocaleTagError", "builtin_locales", "get_locale", "is_builtin"]
