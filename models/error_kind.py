from enum import StrEnum


class ErrorKind(StrEnum):
    CAPACITY_EXCEEDED = 'capacity_exceeded'
    IO_ERROR = 'io_error'
    INVALID_INPUT = 'invalid_input'
