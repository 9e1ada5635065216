"""Persistence entities."""
