"""Composition root for the orderbench service.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Entry point selection (HTTP server or interactive CLI)
"""

import json
import logging
import sys
from typing import Any

from orderbench.adapters.cli.commands import CLICommandHandler
from orderbench.adapters.http.http_server import ApiHTTPServer
from orderbench.adapters.http.receiver import CALCULATOR_OPERATIONS, ApiReceiver
from orderbench.adapters.notification.stdout import StdoutNotificationAdapter
from orderbench.adapters.notification.webhook import WebhookNotificationAdapter
from orderbench.adapters.store.console import ConsoleOrderStore
from orderbench.adapters.store.sqlite import SQLiteOrderStore
from orderbench.config import Settings, load_settings
from orderbench.core.calculator import Calculator
from orderbench.core.order_service import OrderSubmissionService
from orderbench.core.ports import NotificationPort, OrderStorePort

logger = logging.getLogger(__name__)


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for calculator and order commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("orderbench> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized.
    """
    if command in CALCULATOR_OPERATIONS:
        return cli_handler.calculate(command, args)

    elif command == "submit":
        return cli_handler.submit_order(
            code=args.get("code"),
            verbose=args.get("verbose", False),
        )

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  add | subtract | multiply | divide
    Run an arithmetic operation on two numbers.
    Required: a, b

    Example: divide {"a": 10, "b": 4}

  submit
    Submit an order. The code must start with ORD and be at least
    10 characters long.
    Required: code
    Optional: verbose

    Example: submit {"code": "ORD1234567"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def create_store(settings: Settings) -> OrderStorePort:
    """Instantiate the configured order store.

    Raises:
        ValueError: If the store backend is unknown.
    """
    if settings.store_backend == "console":
        logger.info("Order store: Console")
        return ConsoleOrderStore()
    elif settings.store_backend == "sqlite":
        logger.info(f"Order store initialized: {settings.store_sqlite_path}")
        return SQLiteOrderStore(db_path=settings.store_sqlite_path)
    raise ValueError(f"Unknown store backend: {settings.store_backend}")


def create_notification(settings: Settings) -> NotificationPort:
    """Instantiate the configured notification adapter.

    Raises:
        ValueError: If the backend is unknown or the webhook URL is missing.
    """
    if settings.notification_backend == "stdout":
        logger.info("Notification adapter: Stdout")
        return StdoutNotificationAdapter(verbose=settings.debug)
    elif settings.notification_backend == "webhook":
        if not settings.notification_webhook_url:
            raise ValueError(
                "Webhook notification backend selected but NOTIFICATION_WEBHOOK_URL not set"
            )
        logger.info("Notification adapter: Webhook")
        return WebhookNotificationAdapter(
            url=settings.notification_webhook_url,
            timeout_seconds=settings.notification_timeout_seconds,
        )
    raise ValueError(
        f"Unknown notification backend: {settings.notification_backend}"
    )


def bootstrap(settings: Settings | None = None) -> None:
    """Load configuration, wire adapters, and start the application.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters with configuration
    4. Initialize core services
    5. Select and start run mode

    Raises:
        ValueError: On configuration errors.
    """
    # Step 1: Load configuration
    if settings is None:
        settings = load_settings()

    # Step 2: Configure logging
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Loading orderbench...")

    # Step 3: Instantiate adapters
    logger.info("Initializing adapters...")
    store = create_store(settings)
    notification = create_notification(settings)

    # Step 4: Initialize core services
    logger.info("Initializing core services...")
    calculator = Calculator(delay_seconds=settings.subtract_delay_seconds)
    order_service = OrderSubmissionService(store=store, notification=notification)

    # Step 5: Select run mode and start
    logger.info(f"Starting in {settings.run_mode} mode...")

    try:
        if settings.run_mode == "server":
            receiver = ApiReceiver(
                calculator=calculator,
                order_submission=order_service,
            )
            http_server = ApiHTTPServer(
                receiver=receiver,
                host=settings.http_host,
                port=settings.http_port,
                api_key=settings.http_api_key or None,
                require_auth=settings.http_require_auth,
            )
            http_server.serve_forever()

        elif settings.run_mode == "cli":
            cli_handler = CLICommandHandler(
                calculator=calculator,
                order_submission=order_service,
            )
            _run_cli_interactive(cli_handler)

        else:
            raise ValueError(f"Unknown run mode: {settings.run_mode}")

    finally:
        if isinstance(notification, WebhookNotificationAdapter):
            notification.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
