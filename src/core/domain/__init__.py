"""Domain models, errors and encoders.

Why:
- Pure data structures (Pydantic v2) and value codecs live here.
- The domain knows nothing about HTTP clients or the CLI.
"""
