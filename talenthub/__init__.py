"""Recruitment tracking backend: record store with incrementally maintained dashboard statistics."""
