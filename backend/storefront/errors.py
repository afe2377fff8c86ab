"""
Error types for the listing form and the product dashboard.
"""
from enum import Enum
from typing import Optional


class ValidationError(str, Enum):
    """A failed draft rule. Its value is the message shown inline."""
    TITLE = "Title is required"
    PRICE = "Price must be greater than 0"
    DESCRIPTION = "Description is required"
    CATEGORY = "Category is required"
    IMAGE = "Please upload an image"


class FakeStoreError(Exception):
    """Non-2xx status or transport failure talking to the Fake Store API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SubmissionError(Exception):
    MESSAGE = "Failed to add product. Please try again."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class LoadError(Exception):
    pass


class ImageReadError(Exception):
    pass
