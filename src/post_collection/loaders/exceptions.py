"""Custom exceptions for content loaders."""

from pathlib import Path


class LoaderError(Exception):
    """Base exception for all loader errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ContentNotFoundError(LoaderError):
    """Raised when the content directory does not exist."""

    def __init__(self, path: Path, message: str | None = None):
        self.path = path
        super().__init__(message or f"Content directory not found: {path}")


class FrontMatterError(LoaderError):
    """Raised when a post has missing or unparseable front matter."""

    def __init__(self, message: str, path: Path, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)


class ValidationError(LoaderError):
    """Raised when front matter fails schema validation."""

    def __init__(
        self, message: str, path: Path, errors: list | None = None, *args, **kwargs
    ):
        self.path = path
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class ReadError(LoaderError):
    """Raised when a post file cannot be read or decoded."""

    def __init__(self, message: str, path: Path, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)
