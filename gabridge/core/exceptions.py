"""Shared exceptions module.

None of these cross the public tracker boundary: they are raised internally
and turned into log diagnostics where the operation gives up.
"""

from typing import Optional


class GaBridgeException(Exception):
    """Base exception for gabridge."""

    pass


class ConfigurationError(GaBridgeException):
    """Exception raised when no analytics backend is installed in the host."""

    def __init__(
        self,
        message: Optional[str] = "Neither Classic nor Universal Analytics detected",
    ):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class HitValidationError(GaBridgeException):
    """Exception raised when a hit is missing a required field."""

    def __init__(self, field_name: str, message: str = "Missing required field"):
        """Create a new HitValidationError instance.

        Args:
        ----
            field_name (str): The name of the missing or invalid field.
            message (str, optional): The error message. Has default message.

        """
        self.field_name = field_name
        self.message = message
        super().__init__(f"{message}: {field_name}")


class UnsupportedOperationError(GaBridgeException):
    """Exception raised when a hit type cannot be expressed in a backend protocol."""

    def __init__(self, hit_type: str, protocol: str):
        """Create a new UnsupportedOperationError instance.

        Args:
        ----
            hit_type (str): The hit type that could not be translated.
            protocol (str): The backend protocol that lacks support for it.

        """
        self.hit_type = hit_type
        self.protocol = protocol
        self.message = f"{protocol} Analytics does not support '{hit_type}' hits"
        super().__init__(self.message)
