"""Notification adapters for order confirmations.

Implementations support multiple output channels:
- Stdout (terminal print, standing in for email)
- Webhook (JSON POST via httpx)
"""
