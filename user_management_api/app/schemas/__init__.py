"""
Pydantic schema definitions for API payloads.

Request and response bodies are defined here, separate from the
database entity in ``models`` so that the API representation (which
never exposes passwords) is decoupled from persistence.
"""
