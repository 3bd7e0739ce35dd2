"""varlang utilities."""

import sys

EXIT_SUCCESS: int = 0
EXIT_ERROR: int = 1


def log(*args, file=None, **kwargs):
    """Prints log messages to stderr."""
    print(*args, file=file or sys.stderr, **kwargs)


def silent(*args, **kwargs):
    """Logger that discards everything. Default for the core components."""


def log_info(message: str = "", *args, file=None, **kwargs):
    """Prints an informational message to stderr in terminal blue-tint."""
    print(f"\033[34m{message}\033[m", *args, file=file or sys.stderr, **kwargs)


def log_warning(message: str = "", *args, file=None, **kwargs):
    """Prints a warning message to stderr in terminal yellow-tint."""
    print(f"\033[33m{message}\033[m", *args, file=file or sys.stderr, **kwargs)


def log_success(message: str = "", *args, file=None, **kwargs):
    """Prints a success message to stderr in terminal green-tint."""
    print(f"\033[32m{message}\033[m", *args, file=file or sys.stderr, **kwargs)


def log_error(message: str = "", *args, file=None, **kwargs):
    """Prints an error message to stderr in terminal red-tint."""
    print(f"\033[31m{message}\033[m", *args, file=file or sys.stderr, **kwargs)
