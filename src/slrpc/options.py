"""Per-call query shaping options."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional


MASK_PREFIX = "mask["


def wrap_mask(mask: str) -> str:
    """Return *mask* in its canonical ``mask[...]`` form.

    Only masks with a sub-selector (a ``[`` character) that are not
    already wrapped get wrapped; anything else is returned unchanged.
    Applying this more than once yields the same string.
    """

    if mask.startswith(MASK_PREFIX) or "[" not in mask:
        return mask
    return f"{MASK_PREFIX}{mask}]"


@dataclass(frozen=True)
class Options:
    """Query options attached to a single call.

    Instances are immutable; the ``with_*`` methods return a modified copy,
    so one base instance can safely seed many concurrent calls.
    """

    id: Optional[int] = None
    mask: Optional[str] = None
    filter: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def with_id(self, id: int) -> Options:
        return dataclasses.replace(self, id=id)

    def with_mask(self, mask: str) -> Options:
        return dataclasses.replace(self, mask=wrap_mask(mask))

    def with_filter(self, filter: str) -> Options:
        return dataclasses.replace(self, filter=filter)

    def with_limit(self, limit: int) -> Options:
        return dataclasses.replace(self, limit=limit)

    def with_offset(self, offset: int) -> Options:
        return dataclasses.replace(self, offset=offset)
