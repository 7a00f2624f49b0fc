"""SQLite order store adapter.

Implements OrderStorePort using SQLite. Orders are appended; the store does
not enforce uniqueness, so submitting a code twice yields two rows.
"""

import logging
import sqlite3
import threading
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from orderbench.core.models import Order, StoredOrder
from orderbench.core.ports import OrderStorePort

logger = logging.getLogger(__name__)


class SQLiteOrderStore(OrderStorePort):
    """SQLite-backed order store.

    Opens a short-lived connection per operation so one instance can be
    shared across request-handling threads.
    """

    def __init__(self, db_path: str):
        """Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file.
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._schema_lock = threading.Lock()
        self._schema_initialized = False

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def _init_schema(self) -> None:
        """Initialize database schema on first use.

        Only runs once per instance. Subsequent calls are no-ops.
        """
        with self._schema_lock:
            if self._schema_initialized:
                return

            conn = self._connect()
            try:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS orders (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        code TEXT NOT NULL,
                        saved_at TIMESTAMP NOT NULL
                    )
                    """
                )
                conn.execute(
                    "CREATE INDEX IF NOT EXISTS idx_orders_code ON orders(code)"
                )
                conn.commit()
                self._schema_initialized = True
            finally:
                conn.close()

    def save(self, order: Order) -> None:
        """Append an order row."""
        self._init_schema()

        conn = self._connect()
        try:
            conn.execute(
                "INSERT INTO orders (code, saved_at) VALUES (?, ?)",
                (order.code, datetime.now(UTC).isoformat()),
            )
            conn.commit()
        except sqlite3.Error as e:
            logger.error(
                f"Failed to save order: {e}", extra={"code": order.code}
            )
            raise
        finally:
            conn.close()

        logger.debug("Order row inserted", extra={"code": order.code})

    def list_orders(self, code: str | None = None) -> list[StoredOrder]:
        """Return saved orders in insertion order, optionally filtered by code."""
        self._init_schema()

        conn = self._connect()
        try:
            if code is None:
                cursor = conn.execute(
                    "SELECT id, code, saved_at FROM orders ORDER BY id"
                )
            else:
                cursor = conn.execute(
                    "SELECT id, code, saved_at FROM orders WHERE code = ? ORDER BY id",
                    (code,),
                )
            return [self._row_to_order(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def count(self) -> int:
        """Total number of saved orders."""
        self._init_schema()

        conn = self._connect()
        try:
            return conn.execute("SELECT COUNT(*) FROM orders").fetchone()[0]
        finally:
            conn.close()

    @staticmethod
    def _row_to_order(row: tuple[Any, ...]) -> StoredOrder:
        """Convert a database row to a StoredOrder.

        Raises:
            ValueError: If the row is malformed.
        """
        if not row or len(row) != 3:
            raise ValueError(
                f"Invalid row length: expected 3, got {len(row) if row else 0}"
            )

        order_id, code, saved_at = row
        try:
            saved_at_dt = datetime.fromisoformat(saved_at)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid date format: {e}") from e

        return StoredOrder(id=order_id, code=code, saved_at=saved_at_dt)
