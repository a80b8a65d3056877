"""Value objects identifying and naming samples."""

from __future__ import annotations

import uuid
from collections.abc import Iterable


class SampleID(str):
    """Identifier of a sample; never empty."""

    __slots__ = ()

    def __new__(cls, value: str) -> "SampleID":
        if len(value) == 0:
            raise ValueError(f"SampleID size must be greater than 0 (s:{value})")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"SampleID({str(self)!r})"


class SampleName(str):
    """Name of a sample; never empty."""

    __slots__ = ()

    def __new__(cls, value: str) -> "SampleName":
        if len(value) == 0:
            raise ValueError("SampleName must not be empty")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"SampleName({str(self)!r})"


def create_random_sample_id() -> SampleID:
    """Create a random identifier from a version 4 UUID."""
    return SampleID(str(uuid.uuid4()))


def sample_ids_to_strings(ids: Iterable[SampleID]) -> list[str]:
    """Convert identifiers to plain strings, keeping their order."""
    return [str(sample_id) for sample_id in ids]