"""Packaged JSON schema files; see ``catalog.json``."""
