"""Shared pytest configuration."""

pytest_plugins = ["gitanalyzer.testing.conftest"]
