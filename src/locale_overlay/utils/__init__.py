"""Shared utilities for locale_overlay."""
