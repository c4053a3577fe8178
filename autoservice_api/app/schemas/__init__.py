"""
Pydantic schema definitions for API payloads.

Each entity (brands, mechanics, tasks) defines its own models for
request and response bodies.  The ``*Read`` models double as the
records returned by the store and the services.
"""
