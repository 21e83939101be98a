"""Domain layer — result primitives, age types, and the validator.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
It never logs or prints.
"""
