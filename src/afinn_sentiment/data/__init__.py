"""Bundled lexicon data."""
