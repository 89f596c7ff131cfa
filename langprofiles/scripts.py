"""
Unicode script classification for profile grams.

Maps characters to their Unicode Script property, classifies whole grams,
and tallies grams per script to find a profile's dominant script.

Common, Inherited and Unknown are neutral: they carry no language
signal and never decide a gram's script. Japanese is written in Han,
Hiragana and Katakana, so for Japanese profiles the two kana scripts
are folded into Han before comparing.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional

import regex

from langprofiles.models import FilterConfig, LanguageProfile

REPLACEMENT_CHARACTER = "\ufffd"


class Script(Enum):
    """Unicode scripts through Unicode 15.0. Values are the Unicode property value names."""
    COMMON = "Common"
    INHERITED = "Inherited"
    UNKNOWN = "Unknown"
    LATIN = "Latin"
    GREEK = "Greek"
    CYRILLIC = "Cyrillic"
    ARMENIAN = "Armenian"
    HEBREW = "Hebrew"
    ARABIC = "Arabic"
    SYRIAC = "Syriac"
    THAANA = "Thaana"
    DEVANAGARI = "Devanagari"
    BENGALI = "Bengali"
    GURMUKHI = "Gurmukhi"
    GUJARATI = "Gujarati"
    ORIYA = "Oriya"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    KANNADA = "Kannada"
    MALAYALAM = "Malayalam"
    SINHALA = "Sinhala"
    THAI = "Thai"
    LAO = "Lao"
    TIBETAN = "Tibetan"
    MYANMAR = "Myanmar"
    GEORGIAN = "Georgian"
    HANGUL = "Hangul"
    ETHIOPIC = "Ethiopic"
    CHEROKEE = "Cherokee"
    CANADIAN_ABORIGINAL = "Canadian_Aboriginal"
    OGHAM = "Ogham"
    RUNIC = "Runic"
    KHMER = "Khmer"
    MONGOLIAN = "Mongolian"
    HIRAGANA = "Hiragana"
    KATAKANA = "Katakana"
    BOPOMOFO = "Bopomofo"
    HAN = "Han"
    YI = "Yi"
    OLD_ITALIC = "Old_Italic"
    GOTHIC = "Gothic"
    DESERET = "Deseret"
    TAGALOG = "Tagalog"
    HANUNOO = "Hanunoo"
    BUHID = "Buhid"
    TAGBANWA = "Tagbanwa"
    LIMBU = "Limbu"
    TAI_LE = "Tai_Le"
    LINEAR_B = "Linear_B"
    UGARITIC = "Ugaritic"
    SHAVIAN = "Shavian"
    OSMANYA = "Osmanya"
    CYPRIOT = "Cypriot"
    BRAILLE = "Braille"
    BUGINESE = "Buginese"
    COPTIC = "Coptic"
    NEW_TAI_LUE = "New_Tai_Lue"
    GLAGOLITIC = "Glagolitic"
    TIFINAGH = "Tifinagh"
    SYLOTI_NAGRI = "Syloti_Nagri"
    OLD_PERSIAN = "Old_Persian"
    KHAROSHTHI = "Kharoshthi"
    BALINESE = "Balinese"
    CUNEIFORM = "Cuneiform"
    PHOENICIAN = "Phoenician"
    PHAGS_PA = "Phags_Pa"
    NKO = "Nko"
    SUNDANESE = "Sundanese"
    BATAK = "Batak"
    LEPCHA = "Lepcha"
    OL_CHIKI = "Ol_Chiki"
    VAI = "Vai"
    SAURASHTRA = "Saurashtra"
    KAYAH_LI = "Kayah_Li"
    REJANG = "Rejang"
    LYCIAN = "Lycian"
    CARIAN = "Carian"
    LYDIAN = "Lydian"
    CHAM = "Cham"
    TAI_THAM = "Tai_Tham"
    TAI_VIET = "Tai_Viet"
    AVESTAN = "Avestan"
    EGYPTIAN_HIEROGLYPHS = "Egyptian_Hieroglyphs"
    SAMARITAN = "Samaritan"
    MANDAIC = "Mandaic"
    LISU = "Lisu"
    BAMUM = "Bamum"
    JAVANESE = "Javanese"
    MEETEI_MAYEK = "Meetei_Mayek"
    IMPERIAL_ARAMAIC = "Imperial_Aramaic"
    OLD_SOUTH_ARABIAN = "Old_South_Arabian"
    INSCRIPTIONAL_PARTHIAN = "Inscriptional_Parthian"
    INSCRIPTIONAL_PAHLAVI = "Inscriptional_Pahlavi"
    OLD_TURKIC = "Old_Turkic"
    BRAHMI = "Brahmi"
    KAITHI = "Kaithi"
    MEROITIC_HIEROGLYPHS = "Meroitic_Hieroglyphs"
    MEROITIC_CURSIVE = "Meroitic_Cursive"
    SORA_SOMPENG = "Sora_Sompeng"
    CHAKMA = "Chakma"
    SHARADA = "Sharada"
    TAKRI = "Takri"
    MIAO = "Miao"
    BASSA_VAH = "Bassa_Vah"
    CAUCASIAN_ALBANIAN = "Caucasian_Albanian"
    DUPLOYAN = "Duployan"
    ELBASAN = "Elbasan"
    GRANTHA = "Grantha"
    KHOJKI = "Khojki"
    KHUDAWADI = "Khudawadi"
    LINEAR_A = "Linear_A"
    MAHAJANI = "Mahajani"
    MANICHAEAN = "Manichaean"
    MENDE_KIKAKUI = "Mende_Kikakui"
    MODI = "Modi"
    MRO = "Mro"
    NABATAEAN = "Nabataean"
    OLD_NORTH_ARABIAN = "Old_North_Arabian"
    OLD_PERMIC = "Old_Permic"
    PAHAWH_HMONG = "Pahawh_Hmong"
    PALMYRENE = "Palmyrene"
    PAU_CIN_HAU = "Pau_Cin_Hau"
    PSALTER_PAHLAVI = "Psalter_Pahlavi"
    SIDDHAM = "Siddham"
    TIRHUTA = "Tirhuta"
    WARANG_CITI = "Warang_Citi"
    AHOM = "Ahom"
    ANATOLIAN_HIEROGLYPHS = "Anatolian_Hieroglyphs"
    HATRAN = "Hatran"
    MULTANI = "Multani"
    OLD_HUNGARIAN = "Old_Hungarian"
    SIGNWRITING = "SignWriting"
    ADLAM = "Adlam"
    BHAIKSUKI = "Bhaiksuki"
    MARCHEN = "Marchen"
    NEWA = "Newa"
    OSAGE = "Osage"
    TANGUT = "Tangut"
    MASARAM_GONDI = "Masaram_Gondi"
    NUSHU = "Nushu"
    SOYOMBO = "Soyombo"
    ZANABAZAR_SQUARE = "Zanabazar_Square"
    DOGRA = "Dogra"
    GUNJALA_GONDI = "Gunjala_Gondi"
    HANIFI_ROHINGYA = "Hanifi_Rohingya"
    MAKASAR = "Makasar"
    MEDEFAIDRIN = "Medefaidrin"
    OLD_SOGDIAN = "Old_Sogdian"
    SOGDIAN = "Sogdian"
    ELYMAIC = "Elymaic"
    NANDINAGARI = "Nandinagari"
    NYIAKENG_PUACHUE_HMONG = "Nyiakeng_Puachue_Hmong"
    WANCHO = "Wancho"
    CHORASMIAN = "Chorasmian"
    DIVES_AKURU = "Dives_Akuru"
    KHITAN_SMALL_SCRIPT = "Khitan_Small_Script"
    YEZIDI = "Yezidi"
    CYPRO_MINOAN = "Cypro_Minoan"
    OLD_UYGHUR = "Old_Uyghur"
    TANGSA = "Tangsa"
    TOTO = "Toto"
    VITHKUQI = "Vithkuqi"
    KAWI = "Kawi"
    NAG_MUNDARI = "Nag_Mundari"

    @property
    def is_neutral(self) -> bool:
        """Common, Inherited and Unknown carry no language signal."""
        return self in _NEUTRAL


_NEUTRAL = frozenset({Script.COMMON, Script.INHERITED, Script.UNKNOWN})
_KANA = frozenset({Script.HIRAGANA, Script.KATAKANA})

# One named group per script; the matching group names the script.
_SCRIPT_PATTERN = regex.compile(
    "|".join(
        rf"(?P<{s.name}>\p{{Script={s.value}}})"
        for s in Script
        if s is not Script.UNKNOWN
    )
)


class ScriptIntegrityError(RuntimeError):
    """A profile's grams can't be reconciled with a single script."""


class MixedScriptError(ScriptIntegrityError):
    """A gram combines two different non-neutral scripts."""

    def __init__(self, gram: str, first: Script, second: Script):
        super().__init__(
            f"Mixed scripts in ngram {gram!r}, found: {first.name} and {second.name}"
        )
        self.gram = gram
        self.first = first
        self.second = second


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

class GramKind(Enum):
    """Outcome of classifying a gram."""
    SCRIPT = "script"
    NEUTRAL = "neutral"
    UNKNOWN = "unknown"
    MIXED = "mixed"


@dataclass(frozen=True)
class GramScript:
    """
    Classification of a single gram.

    Attributes:
        kind: Which outcome applies
        script: The gram's script (SCRIPT), or the first script seen (MIXED)
        conflict: The second, conflicting script (MIXED only)
    """
    kind: GramKind
    script: Optional[Script] = None
    conflict: Optional[Script] = None


NEUTRAL = GramScript(GramKind.NEUTRAL)
UNKNOWN = GramScript(GramKind.UNKNOWN, Script.UNKNOWN)


@lru_cache(maxsize=4096)
def script_of(char: str) -> Script:
    """Unicode Script property of a single character."""
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    match = _SCRIPT_PATTERN.match(char)
    if match is None:
        return Script.UNKNOWN
    return Script[match.lastgroup]


def classify_gram(text: str, fold_japanese: bool = False) -> GramScript:
    """
    Classify a gram by the scripts of its characters.

    Neutral characters are skipped. With ``fold_japanese``, Hiragana and
    Katakana are treated as Han. A gram holding the replacement character
    is UNKNOWN regardless of its other characters.
    """
    first: Optional[Script] = None
    for char in text:
        if char == REPLACEMENT_CHARACTER:
            return UNKNOWN
        script = script_of(char)
        if script.is_neutral:
            continue
        if fold_japanese and script in _KANA:
            script = Script.HAN
        if first is None:
            first = script
        elif script is not first:
            return GramScript(GramKind.MIXED, first, script)
    if first is None:
        return NEUTRAL
    return GramScript(GramKind.SCRIPT, first)


def gram_script(text: str, fold_japanese: bool = False) -> Optional[Script]:
    """
    Strict form of classify_gram.

    Returns:
        The gram's script, Script.UNKNOWN for corrupt grams, or None if
        every character is neutral

    Raises:
        MixedScriptError: If the gram mixes two non-neutral scripts
    """
    result = classify_gram(text, fold_japanese)
    if result.kind is GramKind.MIXED:
        raise MixedScriptError(text, result.script, result.conflict)
    return result.script


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def count_scripts(
    profile: LanguageProfile,
    config: Optional[FilterConfig] = None,
) -> Counter:
    """
    Tally how many grams of a profile belong to each script.

    Each gram counts once, whatever its frequency. Neutral and corrupt
    grams are not counted.

    Raises:
        MixedScriptError: On a mixed gram under the "strict" policy
    """
    config = config or FilterConfig()
    fold = config.folds(profile.locale)

    counts: Counter = Counter()
    for gram, _count in profile.iter_grams():
        result = classify_gram(gram, fold)
        if result.kind is GramKind.SCRIPT:
            counts[result.script] += 1
        elif result.kind is GramKind.MIXED and config.mixed_script_policy == "strict":
            raise MixedScriptError(gram, result.script, result.conflict)
    return counts


def dominant_script(
    profile: LanguageProfile,
    config: Optional[FilterConfig] = None,
) -> Script:
    """
    The script most of the profile's grams are written in.

    Ties go to the script whose Unicode name sorts first.

    Raises:
        ScriptIntegrityError: If the profile has no non-neutral gram
        MixedScriptError: On a mixed gram under the "strict" policy
    """
    counts = count_scripts(profile, config)
    if not counts:
        raise ScriptIntegrityError(
            f"Profile {profile.locale} has no grams in any non-neutral script"
        )
    script, _tally = min(counts.items(), key=lambda item: (-item[1], item[0].value))
    return script
