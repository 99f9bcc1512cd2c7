"""Sex category encoded by the individual number."""

from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    MALE = "male"  # odd individual number
    FEMALE = "female"  # even individual number
