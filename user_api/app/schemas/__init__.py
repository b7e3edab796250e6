"""
Pydantic schema definitions for API payloads.

The same models validate responses at runtime and describe them in the
generated OpenAPI document.
"""
