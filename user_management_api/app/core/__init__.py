"""Configuration, logging, database access and the error taxonomy."""
