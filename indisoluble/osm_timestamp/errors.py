#!/usr/bin/env python3

"""Exceptions raised while decoding timestamps."""


ERR_MSG_CANNOT_PARSE_TIMESTAMP = "cannot parse timestamp"


class TimestampParseError(ValueError):
    """Raised when text is not a valid "yyyy-mm-ddThh:mm:ssZ" timestamp.

    Keeps a short user-facing message apart from the details (offending
    text and reason) meant for logging.
    """

    def __init__(self, internal_details: str = ""):
        super().__init__(ERR_MSG_CANNOT_PARSE_TIMESTAMP)
        self.user_message = ERR_MSG_CANNOT_PARSE_TIMESTAMP
        self.internal_details = internal_details or ERR_MSG_CANNOT_PARSE_TIMESTAMP
