"""Shared fakes and factories for tests."""
