"""FinnishSSN, the decoded personal identity code.

Equality and hashing follow the canonical string, ordering follows the
birth date. Two codes born on the same day are therefore neither ``<``
nor ``>`` each other while still being unequal.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, model_serializer, model_validator

from hetu.core.exceptions import MissingSSNError
from hetu.core.types import SSNString
from hetu.models.gender import Gender
from hetu.validation.pipeline import decode


class FinnishSSN(BaseModel):
    """Immutable, successfully validated identity code."""

    value: SSNString  # exactly as supplied, never reformatted
    date_of_birth: date
    gender: Gender
    is_valid: Literal[True] = True

    model_config = {"frozen": True}

    @classmethod
    def from_string(cls, ssn: SSNString | None) -> FinnishSSN:
        """Strict parse of ``ssn``.

        Raises:
            MissingSSNError: ``ssn`` is None.
            SSNFormatError: One of the validation stages rejected ``ssn``.
        """
        if ssn is None:
            raise MissingSSNError()
        date_of_birth, gender = decode(ssn)
        return cls.model_construct(value=ssn, date_of_birth=date_of_birth, gender=gender)

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> FinnishSSN:
        """Copy; any ``update`` goes through validation again.

        Updating only ``value`` re-decodes the other fields from it.
        """
        if not update:
            return super().model_copy(deep=deep)
        if set(update) == {"value"}:
            return type(self).model_validate(update["value"])
        return type(self).model_validate({**self.__dict__, **update})

    def to_string(self) -> SSNString:
        return self.value

    def __str__(self) -> str:
        return self.value

    # --- pydantic hooks ---

    @model_validator(mode="before")
    @classmethod
    def _decode_string_input(cls, data: Any) -> Any:
        if isinstance(data, str):
            date_of_birth, gender = decode(data)
            return {"value": data, "date_of_birth": date_of_birth, "gender": gender}
        return data

    @model_validator(mode="after")
    def _check_decoded_fields(self) -> FinnishSSN:
        date_of_birth, gender = decode(self.value)
        if date_of_birth != self.date_of_birth or gender != self.gender:
            raise ValueError(f"date_of_birth/gender do not match SSN {self.value!r}")
        return self

    @model_serializer(mode="plain")
    def _serialize(self) -> str:
        return self.value

    # --- equality: canonical string ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FinnishSSN):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    # --- ordering: birth date only ---

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FinnishSSN):
            return NotImplemented
        return self.date_of_birth < other.date_of_birth

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FinnishSSN):
            return NotImplemented
        return self.date_of_birth <= other.date_of_birth

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FinnishSSN):
            return NotImplemented
        return self.date_of_birth > other.date_of_birth

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FinnishSSN):
            return NotImplemented
        return self.date_of_birth >= other.date_of_birth
