"""Test doubles for exercising formcheck without a browser."""

from formcheck.testing.fake_driver import FakeDriver

__all__ = ["FakeDriver"]
