"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The user
collection lives in memory; swapping it for a persistent store only
touches this package, not the API handlers.
"""
