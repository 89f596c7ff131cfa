"""
Decides whether a directory entry could be a language profile.

Profile files are extensionless and named by their locale tag
("en", "zh-CN"); anything else in the directory is ignored.
"""

from pathlib import Path

from langprofiles.locale.tag import LocaleTag, LocaleTagError


def looks_like_profile_name(name: str) -> bool:
    """Check if a bare file name is a valid locale tag."""
    if "." in name:
        return False
    try:
        LocaleTag.parse(name)
    except LocaleTagError:
        return False
    return True


def looks_like_profile_file(path: Path) -> bool:
    """Check if a path is a regular file with a locale-tag name."""
    if not path.is_file():
        return False
    return looks_like_profile_name(path.name)
