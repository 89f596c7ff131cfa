"""
Built-in locale registry.

Lists the locales whose profiles ship inside the package under
``langprofiles/languages/``. Order is stable and is the order in which
``LanguageProfileReader.read_all_builtin`` returns profiles.
"""

from __future__ import annotations

from langprofiles.locale.tag import LocaleTag

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_BUILTIN: tuple[LocaleTag, ...] = tuple(
    LocaleTag.parse(code)
    for code in (
        "de",
        "el",
        "en",
        "fr",
        "ja",
        "ru",
        "zh-CN",
    )
)


def builtin_locales() -> list[LocaleTag]:
    """Return all built-in locales, in registry order."""
    return list(_BUILTIN)


def is_builtin(locale: LocaleTag | str) -> bool:
    """Check if a locale has a profile shipped with the package."""
    if isinstance(locale, str):
        locale = LocaleTag.parse(locale)
    return locale in _BUILTIN


def get_locale(code: str) -> LocaleTag:
    """Look up a built-in locale by its tag string."""
    for locale in _BUILTIN:
        if str(locale) == code:
            return locale
    raise ValueError(
        f"Unsupported language: {code!r}. "
        f"Available: {', '.join(str(l) for l in _BUILTIN) or 'none'}"
    )
