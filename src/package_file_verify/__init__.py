"""Verify installed files against dpkg/rpm package metadata."""
