"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
validate requests, enforce business rules and map entities to
response schemas; SQL lives in ``repositories``.
"""
