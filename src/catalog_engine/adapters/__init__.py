"""Adapters – storage implementations of the repository ports."""
