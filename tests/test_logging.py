import logging
import uuid

import pytest

URL = "/api/v1/products/selling/"


class TestRequestIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "kiosk-7-request-123"
        response = client.get(URL, HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get(URL)
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_request_id_in_logs(self, client, caplog):
        custom_id = "log-test-request-456"
        with caplog.at_level(logging.INFO):
            client.get(URL, HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"request_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )


class TestStructlogConfiguration:
    def test_structlog_is_configured(self):
        import structlog

        config = structlog.get_config()
        assert config["logger_factory"] is not None
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_logging_uses_json_formatter(self):
        from django.conf import settings

        formatter = settings.LOGGING["formatters"]["json"]
        assert formatter["()"].__name__ == "ProcessorFormatter"

    @pytest.mark.parametrize("event", ["order.created", "stock.deducted"])
    def test_logger_accepts_dotted_events(self, event, caplog):
        import structlog

        log = structlog.get_logger("modules.tests")
        with caplog.at_level(logging.INFO):
            log.info(event, product_number="001")
        assert any(event in record.getMessage() for record in caplog.records)
