import functools
import re

import marshmallow
from marshmallow import fields, validate

DEFAULT_MAX_LENGTH = 49

TIME_PATTERN = re.compile(r'^([01][0-9]|2[0-3]):[0-5][0-9]\Z')
SINGLE_LINE_PATTERN = re.compile(r'^[^\r\n]*\Z')

TIME_FORMAT_ERROR = 'Invalid time format. Please use HH:MM (24-hour clock). Example: 14:30'


def text_validators(max_length: int) -> list[validate.Validator]:
    return [
        validate.Length(min=1, error='Input cannot be empty.'),
        validate.Length(max=max_length, error='Input too long (max {max} characters).'),
        validate.Regexp(SINGLE_LINE_PATTERN, error='Input cannot contain line breaks.'),
    ]


def time_validators() -> list[validate.Validator]:
    return [
        validate.Length(min=1, error='Time cannot be empty.'),
        validate.Regexp(TIME_PATTERN, error=TIME_FORMAT_ERROR),
    ]


@functools.lru_cache
def incident_report_schema(max_length: int = DEFAULT_MAX_LENGTH) -> marshmallow.Schema:
    """Schema for the values of a new incident: area, type and time."""
    schema_cls = marshmallow.Schema.from_dict(
        {
            'area': fields.String(required=True, validate=text_validators(max_length)),
            'type': fields.String(required=True, validate=text_validators(max_length)),
            'time': fields.String(required=True, validate=time_validators()),
        },
        name='IncidentReportSchema',
    )
    return schema_cls()


def is_valid_report(area: object, incident_type: object, time: object, max_length: int = DEFAULT_MAX_LENGTH) -> bool:
    errors = incident_report_schema(max_length).validate({'area': area, 'type': incident_type, 'time': time})
    return not errors


def first_error(err: marshmallow.ValidationError) -> str:
    messages = err.messages
    while isinstance(messages, dict):
        messages = next(iter(messages.values()))
    if isinstance(messages, list):
        return str(messages[0])
    return str(messages)
