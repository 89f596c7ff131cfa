"""
Codec for the legacy JSON profile format.

A profile file looks like::

    {"name": "en", "freq": {"a": 120, "th": 40, "the": 31}, "n_words": [900, 700, 500]}

All gram lengths share the single ``freq`` map. ``n_words`` holds the
total occurrence count per gram length; its size fixes which lengths
the profile has (1..len(n_words)), so a length may be present with no
grams.
"""

from __future__ import annotations

import json

from langprofiles.locale.tag import LocaleTag, LocaleTagError
from langprofiles.models import LanguageProfile


class ProfileFormatError(ValueError):
    """Profile bytes are not a valid profile document."""


def decode_profile(data: bytes, encoding: str = "utf-8") -> LanguageProfile:
    """
    Parse profile bytes into a LanguageProfile.

    Raises:
        ProfileFormatError: If the bytes are truncated or malformed
    """
    try:
        doc = json.loads(data.decode(encoding))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ProfileFormatError(f"Not a profile document: {e}") from e

    if not isinstance(doc, dict):
        raise ProfileFormatError("Profile document must be a JSON object")

    try:
        name = doc["name"]
        freq = doc["freq"]
        n_words = doc["n_words"]
    except KeyError as e:
        raise ProfileFormatError(f"Profile document missing key: {e}") from e

    if not isinstance(freq, dict) or not isinstance(n_words, list) or not n_words:
        raise ProfileFormatError("Profile 'freq' must be an object and 'n_words' a non-empty list")

    try:
        locale = LocaleTag.parse(name)
    except LocaleTagError as e:
        raise ProfileFormatError(f"Invalid profile name: {e}") from e

    grams: dict[int, dict[str, int]] = {n: {} for n in range(1, len(n_words) + 1)}
    for gram, count in freq.items():
        table = grams.get(len(gram))
        if table is None:
            raise ProfileFormatError(
                f"Gram {gram!r} doesn't fit the configured lengths 1..{len(n_words)}"
            )
        table[gram] = count

    try:
        return LanguageProfile(locale=locale, grams=grams)
    except ValueError as e:
        raise ProfileFormatError(str(e)) from e


def encode_profile(profile: LanguageProfile, encoding: str = "utf-8") -> bytes:
    """Serialize a profile to the JSON format read by decode_profile."""
    lengths = profile.gram_lengths
    if lengths != list(range(1, len(lengths) + 1)):
        raise ProfileFormatError(
            f"Format needs contiguous gram lengths starting at 1, got {lengths}"
        )
    doc = {
        "freq": dict(profile.iter_grams()),
        "n_words": [profile.num_gram_occurrences(n) for n in lengths],
        "name": str(profile.locale),
    }
    return json.dumps(doc, ensure_ascii=False, sort_keys=True).encode(encoding)
