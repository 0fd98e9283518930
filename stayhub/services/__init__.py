"""Stateful flows built on top of the API wrappers."""
