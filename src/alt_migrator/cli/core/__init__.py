"""Core utilities for CLI - pure functions and shared types."""

from .types import Result, Success, Failure
from .validators import (
    validate_access_token,
    validate_concurrency,
    validate_instance_url,
    validate_outbox_path,
)
from .console import console

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    # Validators
    "validate_access_token",
    "validate_concurrency",
    "validate_instance_url",
    "validate_outbox_path",
    # Console
    "console",
]
