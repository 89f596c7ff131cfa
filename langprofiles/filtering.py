"""
Foreign-script removal for language profiles.

Profiles built from web text pick up grams in scripts that have nothing
to do with the language (Latin loanwords in a Russian corpus, stray CJK
in a Greek one). These functions find the most popular script of a
profile and rebuild it with only that script's grams plus the neutral
ones (digits, punctuation, spaces).
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from langprofiles.models import FilterConfig, LanguageProfile
from langprofiles.scripts import GramKind, MixedScriptError, Script, classify_gram, dominant_script

logger = logging.getLogger("langprofiles.filter")


def _keeps(gram: str, dominant: Script, fold: bool, config: FilterConfig) -> bool:
    result = classify_gram(gram, fold)
    if result.kind is GramKind.MIXED:
        if config.mixed_script_policy == "strict":
            raise MixedScriptError(gram, result.script, result.conflict)
        return False
    if result.kind is GramKind.NEUTRAL:
        return True
    return result.script is dominant


def filter_to_dominant_script(
    profile: LanguageProfile,
    config: Optional[FilterConfig] = None,
) -> LanguageProfile:
    """
    Build a copy of the profile without grams in foreign scripts.

    Kana are folded into Han for Japanese, which is written in all
    three. Counts are copied unchanged and every gram length of the
    source stays present, even if no gram of that length survives.

    Args:
        profile: Profile to clean (not modified)
        config: Filter settings (defaults to FilterConfig())

    Returns:
        New LanguageProfile

    Raises:
        MixedScriptError: If a gram mixes scripts under the "strict" policy
        ScriptIntegrityError: If the profile has no non-neutral gram
    """
    config = config or FilterConfig()
    fold = config.folds(profile.locale)
    dominant = dominant_script(profile, config)

    grams: dict[int, dict[str, int]] = {}
    removed = 0
    for length in profile.gram_lengths:
        kept = {}
        for gram, count in profile.iter_grams(length):
            if _keeps(gram, dominant, fold, config):
                kept[gram] = count
            else:
                removed += 1
        grams[length] = kept

    logger.info(
        f"PROFILE_FILTER: locale={profile.locale} script={dominant.value} "
        f"removed={removed} kept={profile.num_grams() - removed}"
    )
    return LanguageProfile(locale=profile.locale, grams=grams)


def filter_all(
    profiles: Iterable[LanguageProfile],
    config: Optional[FilterConfig] = None,
) -> list[LanguageProfile]:
    """
    Clean every profile, preserving order.

    Returns a new list; the input is left as it was.
    """
    return [filter_to_dominant_script(p, config) for p in profiles]


def foreign_grams(
    profile: LanguageProfile,
    config: Optional[FilterConfig] = None,
) -> dict[int, list[str]]:
    """Grams that filter_to_dominant_script would remove, per gram length."""
    config = config or FilterConfig()
    fold = config.folds(profile.locale)
    dominant = dominant_script(profile, config)
    return {
        length: [
            gram for gram, _count in profile.iter_grams(length)
            if not _keeps(gram, dominant, fold, config)
        ]
        for length in profile.gram_lengths
    }
