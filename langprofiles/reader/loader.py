"""
LanguageProfileReader — loads profiles from package data, resource
providers, files and directories.

Batch loads are all-or-nothing: the first profile that can't be opened
or parsed aborts the whole call, and no partial list is returned.
"""

from __future__ import annotations

import logging
import os
import warnings
from pathlib import Path
from typing import BinaryIO, Iterable, Optional, Union

from langprofiles.locale.builtin import builtin_locales
from langprofiles.locale.tag import LocaleTag
from langprofiles.models import LanguageProfile, ReaderConfig
from langprofiles.reader.codec import ProfileFormatError, decode_profile
from langprofiles.reader.names import looks_like_profile_file
from langprofiles.reader.resources import PackageResourceProvider, ResourceProvider

logger = logging.getLogger("langprofiles.reader")


class ProfileReadError(OSError):
    """A profile or profile directory could not be read."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class LanguageProfileReader:
    """
    Reads LanguageProfiles.

    Example:
        reader = LanguageProfileReader()
        profiles = filter_all(reader.read_all_builtin())
    """

    def __init__(
        self,
        provider: Optional[ResourceProvider] = None,
        registry: Optional[Iterable[LocaleTag]] = None,
        config: Optional[ReaderConfig] = None,
    ):
        self.config = config or ReaderConfig()
        self.provider = provider or PackageResourceProvider(self.config.package)
        self._registry = list(registry) if registry is not None else None

    @property
    def registry(self) -> list[LocaleTag]:
        """Locales considered built-in, in load order."""
        if self._registry is not None:
            return list(self._registry)
        return builtin_locales()

    # -------------------------------------------------------------------
    # Single profiles
    # -------------------------------------------------------------------

    def read_stream(self, stream: BinaryIO, path: Optional[Union[str, Path]] = None) -> LanguageProfile:
        """
        Read a profile from a binary stream.

        The stream is read but not closed; that is up to the caller.

        Raises:
            ProfileReadError: If the stream is unreadable or malformed
        """
        path = path if path is not None else getattr(stream, "name", None)
        try:
            data = stream.read()
        except OSError as e:
            raise ProfileReadError(f"Failed reading profile {path or '<stream>'}: {e}", path) from e
        return self.read_bytes(data, path)

    def read_bytes(self, data: bytes, path: Optional[Union[str, Path]] = None) -> LanguageProfile:
        """Read a profile from in-memory bytes."""
        try:
            profile = decode_profile(data, self.config.encoding)
        except ProfileFormatError as e:
            raise ProfileReadError(f"Malformed profile {path or '<stream>'}: {e}", path) from e
        logger.debug(
            f"PROFILE_LOAD: locale={profile.locale} grams={profile.num_grams()} source={path}"
        )
        return profile

    def read_file(self, path: Union[str, Path]) -> LanguageProfile:
        """Read a profile file from disk."""
        path = Path(path)
        try:
            f = open(path, "rb")
        except OSError as e:
            raise ProfileReadError(f"Cannot open profile file {path}: {e}", path) from e
        with f:
            return self.read_stream(f, path)

    def read_builtin(self, locale: Union[LocaleTag, str]) -> LanguageProfile:
        """
        Read the built-in profile for a locale.

        Raises:
            ProfileReadError: If no profile ships for the locale
        """
        if isinstance(locale, str):
            locale = LocaleTag.parse(locale)
        return self._read_resource(self.provider, self.config.profile_directory, str(locale))

    # -------------------------------------------------------------------
    # Batches
    # -------------------------------------------------------------------

    def read_named(
        self,
        directory: str,
        names: Iterable[str],
        provider: Optional[ResourceProvider] = None,
    ) -> list[LanguageProfile]:
        """
        Read profiles by file name from a resource directory.

        Args:
            directory: Directory inside the provider, e.g. "languages"
            names: Profile file names, e.g. ["en", "fr", "de"]
            provider: Resource provider (defaults to the reader's)

        Returns:
            Profiles in the order of names

        Raises:
            ProfileReadError: On the first name that can't be read
        """
        provider = provider or self.provider
        return [self._read_resource(provider, directory, name) for name in names]

    def read_builtin_many(self, locales: Iterable[Union[LocaleTag, str]]) -> list[LanguageProfile]:
        """Read the built-in profiles for several locales, in order."""
        return [self.read_builtin(locale) for locale in locales]

    def read_all_builtin(self) -> list[LanguageProfile]:
        """Read every built-in profile, in registry order."""
        profiles = self.read_builtin_many(self.registry)
        logger.info(f"PROFILE_LOAD_BUILTIN: count={len(profiles)}")
        return profiles

    def read_all(self) -> list[LanguageProfile]:
        """Deprecated: renamed to read_all_builtin()."""
        warnings.warn(
            "read_all() is deprecated, use read_all_builtin()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.read_all_builtin()

    def read_from_directory(self, path: Union[str, Path]) -> list[LanguageProfile]:
        """
        Load all profiles from a directory on disk.

        Only regular files named by a locale tag are read; subdirectories
        and other files are skipped.

        Returns:
            Profiles in file name order; empty if there is no profile file

        Raises:
            ProfileReadError: If the directory is missing or unreadable,
                or any profile in it fails to load
        """
        path = Path(path)
        if not path.exists():
            raise ProfileReadError(f"No such folder: {path}", path)
        if not path.is_dir():
            raise ProfileReadError(f"Not a folder: {path}", path)
        if not os.access(path, os.R_OK | os.X_OK):
            raise ProfileReadError(f"Folder not readable: {path}", path)

        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            raise ProfileReadError(f"Failed reading from folder: {path}: {e}", path) from e

        profiles = []
        for entry in entries:
            if not looks_like_profile_file(entry):
                logger.debug(f"PROFILE_SKIP: path={entry}")
                continue
            profiles.append(self.read_file(entry))

        logger.info(f"PROFILE_LOAD_DIR: path={path} count={len(profiles)}")
        return profiles

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------

    def _read_resource(self, provider: ResourceProvider, directory: str, name: str) -> LanguageProfile:
        path = f"{directory}/{name}"
        try:
            stream = provider.open(directory, name)
        except OSError as e:
            raise ProfileReadError(f"Cannot open {path}: {e}", path) from e
        if stream is None:
            raise ProfileReadError(f"No language file available named {name} at {path}!", path)
        with stream:
            return self.read_stream(stream, path)
