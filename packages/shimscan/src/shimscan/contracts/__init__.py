"""Packaged JSON schemas for shimscan configuration and reports."""
