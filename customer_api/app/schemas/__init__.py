"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage adapter so that the API
representation stays independent of the document layout in MongoDB.
"""
