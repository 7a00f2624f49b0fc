"""HTTP server adapter for the orderbench API.

Provides a threaded HTTP server using Python's built-in http.server module.
Requests are decoded here and handed to ApiReceiver.

Supports optional API key authentication via the Authorization header
(Bearer token) or X-API-Key.
"""

import hmac
import json
import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from orderbench.adapters.http.receiver import (
    CALCULATOR_OPERATIONS,
    ApiReceiver,
    ApiResponse,
    error_response,
)

logger = logging.getLogger(__name__)

MAX_BODY_SIZE = 1024 * 1024
CALCULATOR_PREFIX = "/api/calculators/"
ORDERS_PATH = "/api/orders"


def make_api_handler(
    receiver: ApiReceiver,
    api_key: str | None,
    require_auth: bool,
) -> type[BaseHTTPRequestHandler]:
    """Factory to create an ApiHTTPHandler class bound to its dependencies.

    Args:
        receiver: Receiver that executes API operations.
        api_key: Optional API key for authentication.
        require_auth: Whether authentication is required.

    Returns:
        An ApiHTTPHandler class configured with the provided dependencies.
    """

    class ApiHTTPHandler(BaseHTTPRequestHandler):
        """HTTP request handler for the calculator and order endpoints."""

        def _check_auth(self) -> bool:
            """Check if request is authenticated.

            Supports two authentication methods:
            1. Authorization: Bearer <api_key>
            2. X-API-Key: <api_key>
            """
            if not require_auth:
                return True

            if not api_key:
                return False

            auth_header = self.headers.get("Authorization", "")
            if auth_header.startswith("Bearer "):
                provided_key = auth_header[7:]
                return hmac.compare_digest(provided_key, api_key)

            api_key_header = self.headers.get("X-API-Key", "")
            if api_key_header:
                return hmac.compare_digest(api_key_header, api_key)

            return False

        def do_POST(self) -> None:
            """Handle POST requests.

            Routes to the receiver based on path.
            """
            if not self._check_auth():
                self._send_api_response(
                    error_response(
                        401, "unauthorized", "Invalid or missing API key"
                    )
                )
                return

            try:
                content_length = int(self.headers.get("Content-Length", 0))
            except ValueError:
                content_length = -1
            if content_length < 0:
                self._send_api_response(
                    error_response(400, "bad_request", "Invalid Content-Length")
                )
                return

            if content_length > MAX_BODY_SIZE:
                self._send_api_response(
                    error_response(413, "payload_too_large", "Request body too large")
                )
                return

            body = self.rfile.read(content_length) if content_length > 0 else b""

            try:
                data = json.loads(body) if body else {}
            except json.JSONDecodeError:
                self._send_api_response(
                    error_response(400, "bad_request", "Invalid JSON body")
                )
                return

            try:
                response = self._route(data)
            except Exception as e:
                # Full detail stays in the server log
                logger.error(f"Error handling API request: {e}", exc_info=True)
                response = error_response(
                    500, "internal_error", "Internal server error"
                )

            self._send_api_response(response)

        def do_GET(self) -> None:
            """Handle GET requests.

            Only the health check is served. It is always public.
            """
            if self.path == "/health":
                self._send_api_response(
                    ApiResponse(status_code=200, body={"status": "healthy"})
                )
            else:
                self._send_api_response(
                    error_response(404, "not_found", "Not found")
                )

        def _route(self, data: Any) -> ApiResponse:
            if self.path.startswith(CALCULATOR_PREFIX):
                operation = self.path[len(CALCULATOR_PREFIX):]
                if operation in CALCULATOR_OPERATIONS:
                    return receiver.handle_calculation(operation, data)
            elif self.path == ORDERS_PATH:
                return receiver.handle_order_submission(data)
            elif self.path == "/health":
                return ApiResponse(status_code=200, body={"status": "healthy"})
            return error_response(404, "not_found", "Not found")

        def _send_api_response(self, response: ApiResponse) -> None:
            """Send a JSON response."""
            payload = json.dumps(response.body).encode()
            self.send_response(response.status_code)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(payload)))
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.end_headers()
            self.wfile.write(payload)

        def log_message(self, format: str, *args: Any) -> None:
            """Log HTTP request."""
            logger.debug(f"HTTP {self.client_address[0]}: {format % args}")

    return ApiHTTPHandler


class ApiHTTPServer:
    """HTTP server adapter exposing the calculator and order endpoints.

    Serves on a background daemon thread between start() and stop().
    """

    def __init__(
        self,
        receiver: ApiReceiver,
        host: str = "127.0.0.1",
        port: int = 8080,
        api_key: str | None = None,
        require_auth: bool = False,
    ):
        """Initialize the HTTP server.

        Args:
            receiver: ApiReceiver instance to handle requests.
            host: Host to listen on.
            port: Port to listen on. 0 picks a free port.
            api_key: Optional API key for authentication.
            require_auth: Whether to require authentication.
                If True, api_key must be provided.

        Raises:
            ValueError: If require_auth is set without an api_key.
        """
        if require_auth and not api_key:
            raise ValueError(
                "Cannot start server with require_auth=True and no API key provided"
            )

        self.receiver = receiver
        self.host = host
        self.port = port
        self.api_key = api_key
        self.require_auth = require_auth
        self.server: ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None

    @property
    def address(self) -> tuple[str, int]:
        """Bound (host, port); reflects the real port once started."""
        if self.server is None:
            return self.host, self.port
        host, port = self.server.server_address[:2]
        return str(host), int(port)

    def start(self) -> None:
        """Bind the socket and start serving on a background thread."""
        if self.server is not None:
            logger.warning("API HTTP server already running")
            return

        handler_class = make_api_handler(
            receiver=self.receiver,
            api_key=self.api_key,
            require_auth=self.require_auth,
        )
        self.server = ThreadingHTTPServer((self.host, self.port), handler_class)

        host, port = self.address
        if self.require_auth:
            logger.info(
                f"Starting API HTTP server on {host}:{port} "
                "(with API key authentication)"
            )
        else:
            logger.info(f"Starting API HTTP server on {host}:{port}")

        self._thread = threading.Thread(
            target=self.server.serve_forever,
            name="orderbench-http",
            daemon=True,
        )
        self._thread.start()

    def serve_forever(self) -> None:
        """Start the server and block until stop() or KeyboardInterrupt."""
        self.start()
        assert self._thread is not None
        try:
            while self._thread.is_alive():
                self._thread.join(timeout=1.0)
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
        finally:
            self.stop()

    def stop(self) -> None:
        """Stop the server and wait for the serving thread to exit."""
        if self.server is None:
            return
        self.server.shutdown()
        self.server.server_close()
        if self._thread is not None:
            self._thread.join()
        self.server = None
        self._thread = None
        logger.info("API HTTP server stopped")
