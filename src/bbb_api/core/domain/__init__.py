"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2): parameters, responses, entities.
- The domain knows nothing about HTTP or the CLI, only API concepts.
"""
