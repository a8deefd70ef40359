"""Core runtime helpers: settings, logging, errors."""
