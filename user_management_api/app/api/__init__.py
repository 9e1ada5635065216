"""
API package containing versioned routes and the error mapping.

A version subpackage exposes a top‑level ``router`` which includes
all of its endpoints.  ``errors`` translates service exceptions into
HTTP responses for every version.
"""
