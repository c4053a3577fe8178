"""
Service layer.

Each service encapsulates the business logic for one concern and
works against a ``Store`` handed in by the caller, so API handlers
and tests decide which database the work runs on.
"""
