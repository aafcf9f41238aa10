"""Domain models and errors.

Plain data structures (Pydantic v2) and the exception taxonomy shared by the
core, the adapters and the CLI.
"""
