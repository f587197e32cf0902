# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from typing import Optional


class CivicChatError(Exception):
    """Base class for errors that are scoped to a single request."""


class NotFoundError(CivicChatError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(CivicChatError):
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ConversationBusyError(CivicChatError):
    """Raised when a message is sent while another answer for the same conversation is still streaming."""


class UpstreamUnavailableError(CivicChatError):
    """Raised when the text-generation provider cannot start a response."""
