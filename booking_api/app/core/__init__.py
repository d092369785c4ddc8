"""Configuration, database access, logging and security helpers."""
