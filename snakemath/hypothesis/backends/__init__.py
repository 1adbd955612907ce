"""Backends for hypothesis tests."""
