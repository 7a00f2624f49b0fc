"""Console order store adapter.

Implements OrderStorePort by printing a line per saved order. Nothing
is retained; useful for demos and local runs.
"""

import logging

from orderbench.core.models import Order
from orderbench.core.ports import OrderStorePort

logger = logging.getLogger(__name__)


class ConsoleOrderStore(OrderStorePort):
    """Prints saved orders to stdout."""

    def save(self, order: Order) -> None:
        print(f"Order with code {order.code} saved to the database.")
        logger.debug("Order written to console", extra={"code": order.code})
