"""Order submission service: implements OrderSubmissionPort.

Validates an incoming submission, saves the resulting order and sends
a confirmation. Save always happens before the notification, and a
failed notification does not undo the save.
"""

import logging

from .errors import InvalidArgumentError, ValidationFailedError
from .models import Order, SubmissionRequest
from .ports import NotificationPort, OrderStorePort, OrderSubmissionPort

logger = logging.getLogger(__name__)

CODE_PREFIX = "ORD"
MIN_CODE_LENGTH = 10
CONFIRMATION_MESSAGE = "Kayıt başarılı"


class OrderSubmissionService(OrderSubmissionPort):
    """Core implementation of OrderSubmissionPort.

    Holds no state between calls. Submitting the same code twice
    produces two saves and two notifications.
    """

    def __init__(self, store: OrderStorePort, notification: NotificationPort):
        """Initialize the order submission service.

        Args:
            store: OrderStorePort implementation for persistence.
            notification: NotificationPort implementation for confirmations.
        """
        self.store = store
        self.notification = notification

    def handle(self, request: SubmissionRequest | None) -> None:
        """Validate a submission, persist the order and notify.

        Args:
            request: The submission request.

        Raises:
            InvalidArgumentError: If the request or its code is missing.
            ValidationFailedError: If the code is shorter than 10 characters
                or does not start with "ORD".
            Exception: Whatever the store or notification adapter raises.
        """
        if request is None:
            raise InvalidArgumentError("request")

        if not request.code:
            raise InvalidArgumentError("code")

        logger.debug("Order submission received", extra={"code": request.code})

        if not self.is_valid_code(request.code):
            logger.warning(
                "Rejected order submission", extra={"code": request.code}
            )
            raise ValidationFailedError("Code is not valid")

        order = Order(code=request.code)

        self.store.save(order)
        logger.info("Order saved", extra={"code": order.code})

        self.notification.send(CONFIRMATION_MESSAGE)
        logger.info("Order confirmation sent", extra={"code": order.code})

    @staticmethod
    def is_valid_code(code: str) -> bool:
        """Is this code long enough and correctly prefixed?

        Both conditions are reported as a single failure.
        """
        return len(code) >= MIN_CODE_LENGTH and code.startswith(CODE_PREFIX)
