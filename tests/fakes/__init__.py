"""Test fakes for langprofiles reader tests."""

from tests.fakes.fake_resources import FakeResourceProvider

__all__ = ["FakeResourceProvider"]
