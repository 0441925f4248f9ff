import json

import pydantic

from commit_ngrams.data import Event, OtherEvent, PushEvent, PushPayload

PUSH_EVENT = "PushEvent"


class MalformedEventError(ValueError):
    """Raised when a non-blank input line can not be decoded into an event"""

    def __init__(self, reason: str, line_number: int | None = None):
        self.reason = reason
        self.line_number = line_number
        if line_number is not None:
            reason = f"line {line_number}: {reason}"
        super().__init__(reason)


class _PushEventRecord(pydantic.BaseModel):
    payload: PushPayload


def decode_event(line: str, line_number: int | None = None) -> Event:
    """
    Decode one JSON line into PushEvent or OtherEvent

    Only PushEvent records are validated past the "type" field, anything else
    is accepted whatever its shape

    :param line: str, single JSON object
    :param line_number: position of the line in the source, used in errors
    :return: decoded event
    :raises MalformedEventError: invalid JSON, missing "type" or a PushEvent
        without the required commit fields
    """
    try:
        obj = json.loads(line)
    except json.JSONDecodeError as e:
        raise MalformedEventError(f"invalid JSON: {e}", line_number) from e

    if not isinstance(obj, dict):
        raise MalformedEventError("expected a JSON object", line_number)

    event_type = obj.get("type")
    if not isinstance(event_type, str):
        raise MalformedEventError("missing or non-string 'type' field", line_number)

    if event_type != PUSH_EVENT:
        return OtherEvent(type_name=event_type)

    try:
        record = _PushEventRecord.model_validate(obj)
    except pydantic.ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise MalformedEventError(
            f"invalid {PUSH_EVENT} ({fields})", line_number
        ) from e
    return PushEvent(payload=record.payload)
