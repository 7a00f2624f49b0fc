"""Tests for adapter implementations.

Stores and notifiers run against temp files, capsys or httpx.MockTransport;
the HTTP server is exercised over a real loopback socket.
"""
