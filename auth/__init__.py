"""
Auth package for the Secret Gate service.

Provides the HTTP Basic Auth gate: header decoding, the credential check,
and the FastAPI dependency that protects a route with it.
"""
