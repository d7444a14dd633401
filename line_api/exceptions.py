"""
Exceptions raised by the LINE API library
"""

from typing import Any, Dict, Optional


class LineError(Exception):
    """Base exception for LINE library errors"""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ReplyTokenUsedError(LineError):
    """Raised when a context tries to reply to the same event twice"""
    
    def __init__(self, message: str = "Can not reply event multiple times"):
        super().__init__(message, error_code="reply_token_used")


class LineAPIError(LineError):
    """Raised when the Messaging API answers with an error status"""
    
    def __init__(self, message: str, status_code: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code=str(status_code), details=details)
        self.status_code = status_code
