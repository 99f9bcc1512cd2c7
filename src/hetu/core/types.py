"""Type aliases used across the hetu package."""

from __future__ import annotations

SSNString = str  # ddmmyysrrrc
CheckDigits = str  # ddmmyy + rrr, 9 digits
CenturyPrefix = str
