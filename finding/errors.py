"""
Errors raised while turning a command line into a Finding API search.

Every error carries the process exit code the CLI should terminate with.
"""

from typing import Iterable, Optional


class FindItemError(Exception):
    """Base class for all fatal FindItem conditions"""
    exit_code = 1


class HelpRequested(FindItemError):
    """--help was given; not an error, but it ends the run"""
    exit_code = 0


class UsageError(FindItemError):
    exit_code = 1


class ConfigError(FindItemError):
    exit_code = 2


class DuplicateKeywordsError(FindItemError):
    exit_code = 2

    def __init__(self, current: str, extra: str):
        self.current = current
        self.extra = extra
        super().__init__(
            f"ERROR: Auction search keywords already set: {current} "
            f"(unexpected second phrase: {extra})"
        )


class InvalidOptionError(FindItemError):
    exit_code = 3

    def __init__(self, option: str, valid_options: Iterable[str]):
        self.option = option
        self.valid_options = list(valid_options)
        lines = [f"ERROR: Unknown option '{option}'", "", "Valid command-line options are:"]
        lines.extend(f"    --{name} value" for name in self.valid_options)
        super().__init__("\n".join(lines))


class MissingOptionValueError(FindItemError):
    exit_code = 3

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"ERROR: Option '--{option}' needs a value")


class MissingKeywordsError(FindItemError):
    exit_code = 3

    def __init__(self, found_options: dict):
        self.found_options = found_options
        super().__init__(
            "Error: Couldn't find item search keywords in the command-line. "
            f"Found these options:\n\t{found_options}"
        )


class InvalidPageSizeError(FindItemError):
    exit_code = 3

    def __init__(self, value: str, reason: str = "is not an integer"):
        self.value = value
        super().__init__(f"ERROR: Number of items to return '{value}' {reason}")


class ServiceError(FindItemError):
    """The Finding service could not be reached or refused the call"""
    exit_code = 4

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
