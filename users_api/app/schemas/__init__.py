"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON exchanged over HTTP and are kept apart from
the store so the wire representation can evolve independently.
"""
