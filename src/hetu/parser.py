"""Public entry points: strict parse, validity predicate, fallible parse."""

from __future__ import annotations

import logging

from hetu.core.config import HetuSettings
from hetu.core.exceptions import SSNFormatError
from hetu.core.types import SSNString
from hetu.models.identifier import FinnishSSN
from hetu.validation.pipeline import is_decodable

logger = logging.getLogger(__name__)


def parse(ssn: SSNString | None, settings: HetuSettings | None = None) -> FinnishSSN:
    """Parse a Finnish personal identity code.

    The returned value keeps ``ssn`` verbatim; ``str()`` gives it back.

    Raises:
        MissingSSNError: ``ssn`` is None.
        InvalidFormatError: Wrong length or character class.
        ChecksumMismatchError: Check character does not match.
        InvalidDateOfBirthError: Day/month out of range or no such calendar day.
    """
    try:
        return FinnishSSN.from_string(ssn)
    except SSNFormatError as exc:
        if settings is None:
            settings = HetuSettings()
        if settings.log_rejections:
            # the code itself is personal data, log only its shape
            logger.debug(
                "Rejected SSN: %s (length=%d)",
                type(exc).__name__, len(ssn) if isinstance(ssn, str) else -1,
            )
        raise


def is_valid_finnish_ssn(ssn: object) -> bool:
    """True if ``parse`` would accept ``ssn``. Never raises."""
    return isinstance(ssn, str) and is_decodable(ssn)


def try_parse(ssn: object) -> tuple[bool, FinnishSSN | None]:
    """Return ``(True, FinnishSSN)`` on success, ``(False, None)`` otherwise."""
    if not isinstance(ssn, str):
        return False, None
    try:
        return True, FinnishSSN.from_string(ssn)
    except SSNFormatError:
        return False, None
