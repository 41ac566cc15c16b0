"""Toolshelf backend: accounts, sessions, favorites and tool comments."""
