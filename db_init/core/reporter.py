"""
Outcome reporting to the invoking orchestrator.

Follows the CloudFormation custom-resource response protocol: the response
document is PUT to the pre-signed ResponseURL carried in the event. Invokers
that read the synchronous Lambda result (Pulumi's aws.lambda_.Invocation)
get the same document as the handler's return value.

Delivery is best-effort: failures are logged, never raised.

Dependencies: requests
System role: SUCCESS/FAILED status callback
"""

import json
import logging
from enum import Enum
from typing import Any

import requests

logger = logging.getLogger(__name__)

REPORT_TIMEOUT_SECONDS = 10


class ReportStatus(str, Enum):
    """Terminal invocation outcome."""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


def build_response(
    event: dict[str, Any],
    context: Any,
    status: ReportStatus,
    data: dict[str, Any],
    physical_resource_id: str | None = None,
    no_echo: bool = False,
    reason: str | None = None,
) -> dict[str, Any]:
    """
    Build the custom-resource response document.

    Args:
        event: Invocation event (StackId, RequestId, ... passed through)
        context: Lambda context (log_stream_name used for defaults)
        status: SUCCESS or FAILED
        data: Payload exposed to the orchestrator
        physical_resource_id: Defaults to the log stream name
        no_echo: Mask Data in orchestrator output
        reason: Defaults to a pointer at the CloudWatch log stream

    Returns:
        dict: Response document
    """
    log_stream_name = getattr(context, "log_stream_name", None) or "unknown"
    return {
        "Status": status.value,
        "Reason": reason or f"See the details in CloudWatch Log Stream: {log_stream_name}",
        "PhysicalResourceId": physical_resource_id
        or event.get("PhysicalResourceId")
        or log_stream_name,
        "StackId": event.get("StackId"),
        "RequestId": event.get("RequestId"),
        "LogicalResourceId": event.get("LogicalResourceId"),
        "NoEcho": no_echo,
        "Data": data,
    }


def send_response(
    event: dict[str, Any],
    context: Any,
    status: ReportStatus,
    data: dict[str, Any],
    physical_resource_id: str | None = None,
    no_echo: bool = False,
    reason: str | None = None,
) -> dict[str, Any]:
    """
    Report the outcome and return the response document.

    The document is PUT to event["ResponseURL"] when present. Transport
    errors and non-2xx replies are logged only.

    Returns:
        dict: The response document (also the handler's return value)
    """
    response_body = build_response(
        event,
        context,
        status,
        data,
        physical_resource_id=physical_resource_id,
        no_echo=no_echo,
        reason=reason,
    )

    response_url = event.get("ResponseURL")
    if not response_url:
        logger.info(
            "send_response - No ResponseURL, returning result to caller",
            extra={"status": status.value},
        )
        return response_body

    body = json.dumps(response_body)
    # Pre-signed S3 URLs reject requests carrying a content type
    headers = {"content-type": "", "content-length": str(len(body))}

    try:
        reply = requests.put(
            response_url,
            data=body,
            headers=headers,
            timeout=REPORT_TIMEOUT_SECONDS,
        )
        reply.raise_for_status()
        logger.info(
            "send_response - Delivered",
            extra={"status": status.value, "http_status": reply.status_code},
        )
    except requests.RequestException as e:
        logger.error("send_response - Delivery failed: %s: %s", type(e).__name__, e)

    return response_body
