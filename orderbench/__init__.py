"""orderbench: arithmetic and order submission behind ports and adapters."""

__version__ = "0.1.0"
