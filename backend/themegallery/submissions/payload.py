"""Decoding and validation of incoming submission events."""

import base64
import binascii
import json
from typing import Any, Union

from themegallery.core.exceptions import SubmissionPayloadError
from themegallery.schemas import SubmissionEvent, ThemeSubmission


def decode_event(event: Union[SubmissionEvent, dict]) -> Any:
    """Return the JSON document carried by an event body.

    Args:
        event: The event, or its raw mapping with ``body`` and ``isBase64Encoded``.

    Raises:
        SubmissionPayloadError: If the body is missing, is not valid base64 when
            flagged as encoded, or is not valid JSON.
    """
    if not isinstance(event, SubmissionEvent):
        event = SubmissionEvent.model_validate(event)

    if not event.body:
        raise SubmissionPayloadError("No body")

    raw = event.body
    if event.is_base64_encoded:
        try:
            raw = base64.b64decode(event.body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise SubmissionPayloadError(f"Body is not valid base64: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise SubmissionPayloadError(f"Body is not valid JSON: {e}") from e


def parse_submission(event: Union[SubmissionEvent, dict]) -> ThemeSubmission:
    """Decode an event and validate its ``data`` member as a theme submission.

    Raises:
        SubmissionPayloadError: If the body cannot be decoded.
        pydantic.ValidationError: If ``data`` is missing or does not match the schema.
    """
    payload = decode_event(event)
    data = payload.get("data") if isinstance(payload, dict) else None
    return ThemeSubmission.model_validate(data)
