"""The Sample entity."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .value import SampleID, SampleName, create_random_sample_id


@dataclass(frozen=True)
class Sample:
    """A sample with an identifier and a name."""

    id: SampleID
    name: SampleName

    def update(self, name: SampleName) -> "Sample":
        """Return a copy with a new name; only the name may change."""
        return dataclasses.replace(self, name=name)


def create_default_sample(name: SampleName) -> Sample:
    """Create a sample with a freshly generated random identifier."""
    return Sample(create_random_sample_id(), name)