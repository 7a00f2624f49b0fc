"""Unit tests for ApiReceiver.

The calculator port is mocked so each test pins the controller behavior
only; the order port is backed by the core service wired to fakes.
"""

import sys
from unittest.mock import MagicMock, call

import pytest

from orderbench.adapters.http.receiver import ADD_LOCATION, ApiReceiver
from orderbench.core.models import Order
from orderbench.core.order_service import OrderSubmissionService
from orderbench.core.ports import CalculatorPort, OrderSubmissionPort
from orderbench.tests.fakes import FakeNotificationPort, FakeOrderStorePort


@pytest.fixture
def calculator_mock() -> MagicMock:
    return MagicMock(spec=CalculatorPort)


@pytest.fixture
def store() -> FakeOrderStorePort:
    return FakeOrderStorePort()


@pytest.fixture
def notification() -> FakeNotificationPort:
    return FakeNotificationPort()


@pytest.fixture
def receiver(
    calculator_mock: MagicMock,
    store: FakeOrderStorePort,
    notification: FakeNotificationPort,
) -> ApiReceiver:
    return ApiReceiver(
        calculator=calculator_mock,
        order_submission=OrderSubmissionService(store=store, notification=notification),
    )


# ============================================================================
# Calculator endpoints
# ============================================================================


class TestAdd:
    def test_returns_created_with_location(
        self, receiver: ApiReceiver, calculator_mock: MagicMock
    ) -> None:
        calculator_mock.add.return_value = 15

        response = receiver.handle_calculation("add", {"a": 10, "b": 5})

        assert response.status_code == 201
        assert response.body == {"result": 15}
        assert response.headers == {"Location": ADD_LOCATION}
        calculator_mock.add.assert_called_once_with(10, 5)
        assert calculator_mock.mock_calls == [call.add(10, 5)]

    @pytest.mark.parametrize(
        "a,b,expected",
        [(0, 0, 0), (-5, 5, 0), (100.5, 200.3, 300.8), (-10, -20, -30)],
    )
    def test_passes_result_through(
        self,
        receiver: ApiReceiver,
        calculator_mock: MagicMock,
        a: float,
        b: float,
        expected: float,
    ) -> None:
        calculator_mock.add.return_value = expected

        response = receiver.handle_calculation("add", {"a": a, "b": b})

        assert response.body["result"] == expected
        calculator_mock.add.assert_called_once_with(a, b)


class TestOtherOperations:
    @pytest.mark.parametrize("operation", ["subtract", "multiply", "divide"])
    def test_returns_ok_without_location(
        self, receiver: ApiReceiver, calculator_mock: MagicMock, operation: str
    ) -> None:
        getattr(calculator_mock, operation).return_value = 2.0

        response = receiver.handle_calculation(operation, {"a": 4, "b": 2})

        assert response.status_code == 200
        assert response.body == {"result": 2.0}
        assert response.headers == {}
        getattr(calculator_mock, operation).assert_called_once_with(4, 2)

    def test_division_by_zero_is_unprocessable(
        self, receiver: ApiReceiver, calculator_mock: MagicMock
    ) -> None:
        calculator_mock.divide.side_effect = ZeroDivisionError("Attempted to divide by zero")

        response = receiver.handle_calculation("divide", {"a": 10, "b": 0})

        assert response.status_code == 422
        assert response.body["error"] == "division_by_zero"
        assert response.body["status"] == "error"

    def test_overflow_is_unprocessable(
        self, receiver: ApiReceiver, calculator_mock: MagicMock
    ) -> None:
        calculator_mock.multiply.side_effect = OverflowError("overflow")

        response = receiver.handle_calculation(
            "multiply", {"a": sys.float_info.max, "b": 5}
        )

        assert response.status_code == 422
        assert response.body["error"] == "overflow"

    def test_unexpected_errors_propagate(
        self, receiver: ApiReceiver, calculator_mock: MagicMock
    ) -> None:
        calculator_mock.add.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            receiver.handle_calculation("add", {"a": 1, "b": 2})


class TestPayloadValidation:
    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"a": 1},
            {"a": "one", "b": 2},
            {"a": None, "b": 2},
            [1, 2],
            None,
        ],
    )
    def test_bad_operands_are_rejected(
        self, receiver: ApiReceiver, calculator_mock: MagicMock, data: object
    ) -> None:
        response = receiver.handle_calculation("add", data)

        assert response.status_code == 400
        assert response.body["error"] == "bad_request"
        calculator_mock.add.assert_not_called()

    def test_numeric_strings_are_coerced(
        self, receiver: ApiReceiver, calculator_mock: MagicMock
    ) -> None:
        calculator_mock.add.return_value = 3.0

        receiver.handle_calculation("add", {"a": "1", "b": "2"})

        calculator_mock.add.assert_called_once_with(1.0, 2.0)

    def test_unknown_operation_raises(self, receiver: ApiReceiver) -> None:
        with pytest.raises(ValueError, match="Unknown calculator operation"):
            receiver.handle_calculation("modulo", {"a": 1, "b": 2})


# ============================================================================
# Order submission
# ============================================================================


class TestOrderSubmission:
    def test_valid_order(
        self,
        receiver: ApiReceiver,
        store: FakeOrderStorePort,
        notification: FakeNotificationPort,
    ) -> None:
        response = receiver.handle_order_submission({"code": "ORD1234567"})

        assert response.status_code == 200
        assert response.body == {"status": "success", "code": "ORD1234567"}
        assert store.saved_orders == [Order(code="ORD1234567")]
        assert notification.send_call_count == 1

    @pytest.mark.parametrize("code", ["ORD123", "ABC1234567"])
    def test_invalid_code(
        self, receiver: ApiReceiver, store: FakeOrderStorePort, code: str
    ) -> None:
        response = receiver.handle_order_submission({"code": code})

        assert response.status_code == 400
        assert response.body["error"] == "validation_failed"
        assert response.body["message"] == "Code is not valid"
        assert store.save_call_count == 0

    @pytest.mark.parametrize("data", [{}, {"code": ""}, {"code": None}])
    def test_missing_code(self, receiver: ApiReceiver, data: dict) -> None:
        response = receiver.handle_order_submission(data)

        assert response.status_code == 400
        assert response.body["error"] == "invalid_argument"
        assert "code" in response.body["message"]

    def test_null_body_is_missing_request(self, receiver: ApiReceiver) -> None:
        response = receiver.handle_order_submission(None)

        assert response.status_code == 400
        assert response.body["error"] == "invalid_argument"
        assert "request" in response.body["message"]

    def test_wrong_code_type(self, receiver: ApiReceiver) -> None:
        response = receiver.handle_order_submission({"code": 1234567890})

        assert response.status_code == 400
        assert response.body["error"] == "bad_request"

    def test_delegates_to_submission_port(self, calculator_mock: MagicMock) -> None:
        submission_mock = MagicMock(spec=OrderSubmissionPort)
        receiver = ApiReceiver(calculator=calculator_mock, order_submission=submission_mock)

        receiver.handle_order_submission({"code": "ORD1234567"})

        submission_mock.handle.assert_called_once()
        (request,), _ = submission_mock.handle.call_args
        assert request.code == "ORD1234567"

    def test_notification_failure_propagates(
        self,
        receiver: ApiReceiver,
        store: FakeOrderStorePort,
        notification: FakeNotificationPort,
    ) -> None:
        notification.set_should_fail(True)

        with pytest.raises(RuntimeError):
            receiver.handle_order_submission({"code": "ORD1234567"})

        assert store.save_call_count == 1
