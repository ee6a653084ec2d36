"""Unit tests for outcome reporting."""

import json
from unittest.mock import MagicMock, patch

import requests

from db_init.core.reporter import ReportStatus, build_response, send_response

SUCCESS_DATA = {"statusCode": 200, "body": json.dumps("Database initialized successfully!")}


def test_build_response_passes_event_identifiers(custom_resource_event, lambda_context):
    """Stack, request and logical IDs are echoed back."""
    body = build_response(custom_resource_event, lambda_context, ReportStatus.SUCCESS, SUCCESS_DATA)

    assert body["Status"] == "SUCCESS"
    assert body["StackId"] == custom_resource_event["StackId"]
    assert body["RequestId"] == "unique-request-id"
    assert body["LogicalResourceId"] == "InitDbResource"
    assert body["NoEcho"] is False
    assert body["Data"] == SUCCESS_DATA


def test_build_response_defaults_to_log_stream(custom_resource_event, lambda_context):
    """PhysicalResourceId and Reason point at the CloudWatch log stream."""
    body = build_response(custom_resource_event, lambda_context, ReportStatus.FAILED, {})

    assert body["PhysicalResourceId"] == lambda_context.log_stream_name
    assert body["Reason"] == (
        f"See the details in CloudWatch Log Stream: {lambda_context.log_stream_name}"
    )


def test_build_response_keeps_existing_physical_id(custom_resource_event, lambda_context):
    """Update/Delete events keep the physical resource ID they carry."""
    event = {**custom_resource_event, "PhysicalResourceId": "existing-id"}

    body = build_response(event, lambda_context, ReportStatus.SUCCESS, {})

    assert body["PhysicalResourceId"] == "existing-id"


@patch("db_init.core.reporter.requests.put")
def test_send_response_puts_to_response_url(mock_put, custom_resource_event, lambda_context):
    """Report is PUT as JSON with an empty content type."""
    mock_put.return_value = MagicMock(status_code=200)

    result = send_response(custom_resource_event, lambda_context, ReportStatus.SUCCESS, SUCCESS_DATA)

    mock_put.assert_called_once()
    call_args = mock_put.call_args
    assert call_args[0][0] == custom_resource_event["ResponseURL"]
    assert call_args[1]["headers"]["content-type"] == ""
    sent = json.loads(call_args[1]["data"])
    assert sent == result
    assert sent["Status"] == "SUCCESS"
    assert sent["Data"]["statusCode"] == 200


@patch("db_init.core.reporter.requests.put")
def test_send_response_without_url_returns_document(mock_put, lambda_context):
    """Direct invocations get the document back without any HTTP call."""
    result = send_response({"RequestType": "Create"}, lambda_context, ReportStatus.FAILED, {"statusCode": 500})

    mock_put.assert_not_called()
    assert result["Status"] == "FAILED"
    assert result["Data"] == {"statusCode": 500}


@patch("db_init.core.reporter.requests.put")
def test_send_response_swallows_transport_errors(mock_put, custom_resource_event, lambda_context, caplog):
    """Delivery failures are logged, not raised."""
    mock_put.side_effect = requests.ConnectionError("endpoint unreachable")

    result = send_response(custom_resource_event, lambda_context, ReportStatus.SUCCESS, SUCCESS_DATA)

    assert result["Status"] == "SUCCESS"
    assert "Delivery failed" in caplog.text


@patch("db_init.core.reporter.requests.put")
def test_send_response_swallows_http_errors(mock_put, custom_resource_event, lambda_context, caplog):
    """A non-2xx reply from the response URL is logged."""
    reply = MagicMock(status_code=403)
    reply.raise_for_status.side_effect = requests.HTTPError("403 Forbidden")
    mock_put.return_value = reply

    result = send_response(custom_resource_event, lambda_context, ReportStatus.FAILED, {})

    assert result["Status"] == "FAILED"
    assert "403 Forbidden" in caplog.text
