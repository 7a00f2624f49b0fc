"""Command-line interface adapters.

Provides CLI commands for the orderbench service:
- add, subtract, multiply, divide: Run an arithmetic operation
- submit: Submit an order code
"""
