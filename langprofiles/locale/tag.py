"""
LocaleTag — identifies the language variant a profile belongs to.

A tag is written as ``language[-Script][-REGION]``:
- language: 2-3 lowercase ASCII letters ("en", "ast")
- script: 4 letters, titlecase ("Latn", "Cyrl")
- region: 2 uppercase letters or 3 digits ("CN", "419")

The canonical string form doubles as the profile resource name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_LANGUAGE_RE = re.compile(r"^[a-z]{2,3}$")
_SCRIPT_RE = re.compile(r"^[A-Z][a-z]{3}$")
_REGION_RE = re.compile(r"^(?:[A-Z]{2}|[0-9]{3})$")


class LocaleTagError(ValueError):
    """The string is not a well-formed locale tag."""


@dataclass(frozen=True)
class LocaleTag:
    """Immutable language / script / region triple."""

    language: str
    script: Optional[str] = None
    region: Optional[str] = None

    def __post_init__(self) -> None:
        if not _LANGUAGE_RE.match(self.language):
            raise LocaleTagError(f"Invalid language subtag: {self.language!r}")
        if self.script is not None and not _SCRIPT_RE.match(self.script):
            raise LocaleTagError(f"Invalid script subtag: {self.script!r}")
        if self.region is not None and not _REGION_RE.match(self.region):
            raise LocaleTagError(f"Invalid region subtag: {self.region!r}")

    @classmethod
    def parse(cls, text: str) -> "LocaleTag":
        """
        Parse a tag such as "en", "zh-CN" or "sr-Latn-RS".

        Raises:
            LocaleTagError: If the text is not a well-formed tag
        """
        if not isinstance(text, str) or not text:
            raise LocaleTagError(f"Empty or non-string locale tag: {text!r}")

        parts = text.split("-")
        if len(parts) > 3:
            raise LocaleTagError(f"Too many subtags in locale tag: {text!r}")

        language = parts[0]
        script = None
        region = None
        for part in parts[1:]:
            if script is None and region is None and _SCRIPT_RE.match(part):
                script = part
            elif region is None and _REGION_RE.match(part):
                region = part
            else:
                raise LocaleTagError(f"Unexpected subtag {part!r} in locale tag: {text!r}")

        return cls(language=language, script=script, region=region)

    def __str__(self) -> str:
        return "-".join(p for p in (self.language, self.script, self.region) if p)
