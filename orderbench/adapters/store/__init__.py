"""Order store adapters for persistence.

Implementations support multiple backends:
- Console (print only, nothing retained)
- SQLite (zero-config, single-file)
"""
