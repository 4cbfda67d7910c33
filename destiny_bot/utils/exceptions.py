"""
Custom exceptions for the Destiny bot with user-friendly error messages.

Only faults live here. Expected absences (unknown gamertag, no Trials data,
missing inventory) are plain return values and never raise.
"""

class BotException(Exception):
    """Base exception for bot errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class UpstreamServiceError(BotException):
    """Raised when a remote Destiny service fails or answers with an error."""
    def __init__(self, service: str, details: str = None):
        self.service = service
        super().__init__(
            f"{service} request failed: {details}",
            f"❌ {service} is not answering right now. Please try again later."
        )

class CatalogError(BotException):
    """Raised when the local item catalog cannot be queried."""
    def __init__(self, operation: str, details: str = None):
        super().__init__(
            f"Catalog error during {operation}: {details}",
            "❌ Item database error occurred. Please try again later."
        )
