"""Hetu exception hierarchy."""

from __future__ import annotations


class HetuError(Exception):
    """Base exception for all hetu errors."""


class MissingSSNError(HetuError, TypeError):
    """No identity code was given at all."""

    def __init__(self) -> None:
        super().__init__("SSN must not be None")


class SSNFormatError(HetuError, ValueError):
    """Identity code was given but could not be accepted."""

    def __init__(self, ssn: object, message: str) -> None:
        self.ssn = ssn
        super().__init__(message)


class InvalidFormatError(SSNFormatError):
    """Wrong length, or a character outside its position's class."""

    def __init__(self, ssn: object) -> None:
        super().__init__(ssn, f'Given SSN "{ssn}" was not in correct format (ddmmyysrrrc)')


class ChecksumMismatchError(SSNFormatError):
    """Trailing check character does not match the computed one."""

    def __init__(self, ssn: str) -> None:
        super().__init__(ssn, "SSN did not pass the checksum check")


class InvalidDateOfBirthError(SSNFormatError):
    """Day or month out of range, or no such day in the resolved month."""

    def __init__(self, ssn: str) -> None:
        super().__init__(ssn, "SSN contains no date of birth or it's invalid")
