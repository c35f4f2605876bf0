"""Typed request and response shapes, one module per API resource.

The domain layer knows nothing about HTTP: it only maps wire JSON to
pydantic models and back.
"""
