"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage layer to decouple the API
representation (for example the ``DD.MM.YYYY`` date format) from the
way rows are kept in the database.
"""
