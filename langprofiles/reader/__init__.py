"""
Profile loading.

Profiles come from package data, any ResourceProvider, single files,
or whole directories of extensionless files named by locale tag.
"""

from langprofiles.reader.codec import ProfileFormatError, decode_profile, encode_profile
from langprofiles.reader.loader import LanguageProfileReader, ProfileReadError
from langprofiles.reader.names import looks_like_profile_name
from langprofiles.reader.resources import (
    DirectoryResourceProvider,
    PackageResourceProvider,
    ResourceProvider,
)

__all__ = [
    "LanguageProfileReader",
    "ProfileReadError",
    "ProfileFormatError",
    "decode_profile",
    "encode_profile",
    "looks_like_profile_name",
    "ResourceProvider",
    "PackageResourceProvider",
    "DirectoryResourceProvider",
]
