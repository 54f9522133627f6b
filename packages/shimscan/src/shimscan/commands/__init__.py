"""Auxiliary commands that operate on a finished scan or on the host."""
