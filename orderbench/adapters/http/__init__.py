"""HTTP API adapters.

Provides JSON endpoints for the calculator operations and order
submission, plus a public health check.
"""
