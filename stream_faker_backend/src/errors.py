from typing import Optional


class SchemaProcessorError(Exception):
    """Base class for faults raised by the schema processor.

    `status_code` is the HTTP status the control surface answers with and
    `str(error)` is safe to return to the caller.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(SchemaProcessorError):
    status_code = 400


class UpstreamEmptyResponseError(SchemaProcessorError):
    pass


class UpstreamMalformedResponseError(SchemaProcessorError):
    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        # Kept for diagnostics only, never part of the message
        self.raw_text = raw_text


class UpstreamCallError(SchemaProcessorError):
    pass
