"""
Core data models for langprofiles.

These are the values that flow through the system:
- LanguageProfile: n-gram frequencies for one locale
- ReaderConfig: Where and how profiles are loaded
- FilterConfig: How foreign-script grams are removed
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from langprofiles.locale.tag import LocaleTag


@dataclass(frozen=True)
class LanguageProfile:
    """
    N-gram frequencies for a single locale.

    The profile is immutable: grams are stored behind read-only mapping
    views and every transformation builds a new instance.

    Attributes:
        locale: Locale the profile was trained for
        grams: Gram length -> (gram text -> occurrence count). A length may
            map to an empty mapping; it still counts as configured.
    """
    locale: LocaleTag
    grams: Mapping[int, Mapping[str, int]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if isinstance(self.locale, str):
            object.__setattr__(self, "locale", LocaleTag.parse(self.locale))

        for length in self.grams:
            if not isinstance(length, int) or isinstance(length, bool) or length < 1:
                raise ValueError(f"Gram length must be a positive integer, got {length!r}")

        frozen: dict[int, Mapping[str, int]] = {}
        for length in sorted(self.grams):
            table: dict[str, int] = {}
            for gram, count in self.grams[length].items():
                if len(gram) != length:
                    raise ValueError(
                        f"Gram {gram!r} has length {len(gram)}, expected {length}"
                    )
                if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                    raise ValueError(f"Invalid count for gram {gram!r}: {count!r}")
                table[gram] = count
            frozen[length] = MappingProxyType(table)
        object.__setattr__(self, "grams", MappingProxyType(frozen))

    @property
    def gram_lengths(self) -> list[int]:
        """Configured gram lengths, ascending."""
        return list(self.grams)

    def frequency(self, gram: str) -> int:
        """Occurrence count of a gram, 0 if the profile doesn't have it."""
        table = self.grams.get(len(gram))
        if table is None:
            return 0
        return table.get(gram, 0)

    def num_grams(self, length: Optional[int] = None) -> int:
        """Number of distinct grams, for one length or all of them."""
        if length is not None:
            return len(self._table(length))
        return sum(len(table) for table in self.grams.values())

    def num_gram_occurrences(self, length: int) -> int:
        """Sum of all counts for one gram length."""
        return sum(self._table(length).values())

    def min_gram_count(self, length: int) -> int:
        return min(self._table(length).values(), default=0)

    def max_gram_count(self, length: int) -> int:
        return max(self._table(length).values(), default=0)

    def iter_grams(self, length: Optional[int] = None) -> Iterator[tuple[str, int]]:
        """Yield (gram, count) pairs, shortest grams first."""
        lengths = [length] if length is not None else self.gram_lengths
        for n in lengths:
            yield from self._table(n).items()

    def _table(self, length: int) -> Mapping[str, int]:
        if length not in self.grams:
            raise KeyError(f"Gram length {length} not configured for {self.locale}")
        return self.grams[length]

    def __repr__(self) -> str:
        counts = ", ".join(f"{n}: {len(t)}" for n, t in self.grams.items())
        return f"LanguageProfile(locale={str(self.locale)!r}, grams={{{counts}}})"


MIXED_SCRIPT_POLICIES = ("strict", "drop")


@dataclass
class FilterConfig:
    """
    Foreign-script filtering settings.

    Attributes:
        fold_languages: Languages whose Katakana/Hiragana count as Han
        mixed_script_policy: "strict" raises on a gram mixing two scripts,
            "drop" silently removes such grams
    """
    fold_languages: tuple[str, ...] = ("ja",)
    mixed_script_policy: str = "strict"

    def __post_init__(self) -> None:
        self.fold_languages = tuple(self.fold_languages)
        if self.mixed_script_policy not in MIXED_SCRIPT_POLICIES:
            raise ValueError(
                f"Unknown mixed_script_policy: {self.mixed_script_policy!r}. "
                f"Expected one of: {', '.join(MIXED_SCRIPT_POLICIES)}"
            )

    def folds(self, locale: LocaleTag) -> bool:
        """Check if Japanese kana folding applies to this locale."""
        return locale.language in self.fold_languages

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "fold_languages": list(self.fold_languages),
            "mixed_script_policy": self.mixed_script_policy,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FilterConfig":
        """Deserialize from dictionary."""
        return cls(
            fold_languages=tuple(data.get("fold_languages", ("ja",))),
            mixed_script_policy=data.get("mixed_script_policy", "strict"),
        )


@dataclass
class ReaderConfig:
    """
    Profile loading settings.

    Attributes:
        profile_directory: Directory holding built-in profiles, inside the package
        package: Package whose data files hold the built-in profiles
        encoding: Text encoding of profile files
    """
    profile_directory: str = "languages"
    package: str = "langprofiles"
    encoding: str = "utf-8"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "profile_directory": self.profile_directory,
            "package": self.package,
            "encoding": self.encoding,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReaderConfig":
        """Deserialize from dictionary."""
        return cls(
            profile_directory=data.get("profile_directory", "languages"),
            package=data.get("package", "langprofiles"),
            encoding=data.get("encoding", "utf-8"),
        )


def load_config(path: Path) -> tuple[ReaderConfig, FilterConfig]:
    """
    Load reader and filter settings from a JSON file.

    Both sections are optional; missing keys keep their defaults.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return (
        ReaderConfig.from_dict(data.get("reader", {})),
        FilterConfig.from_dict(data.get("filter", {})),
    )
