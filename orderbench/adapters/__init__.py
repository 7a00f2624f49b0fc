"""External adapters for the orderbench service.

This package contains all external dependencies (SQLite, httpx, HTTP
servers, etc.) and provides implementations of the core port interfaces.

Adapter Organization:

- store/: Adapters for order persistence (console, SQLite)
- notification/: Adapters for confirmations (stdout, webhook)
- http/: JSON HTTP API for the calculator and order submission
- cli/: Command-line interface commands
- payloads.py: Request models shared by the http and cli adapters
"""
