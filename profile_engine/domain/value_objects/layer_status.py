"""Layer maturity value objects."""

from enum import Enum
from functools import total_ordering


@total_ordering
class LayerStatus(Enum):
    """Ordered maturity lattice of a layer."""
    UNFORMED = "unformed"
    EMERGING = "emerging"
    DEVELOPED = "developed"
    INTEGRATED = "integrated"

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)

    @property
    def is_unlocked(self) -> bool:
        """Any state beyond unformed."""
        return self is not LayerStatus.UNFORMED

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LayerStatus):
            return NotImplemented
        return self.rank < other.rank


_STATUS_ORDER = [
    LayerStatus.UNFORMED,
    LayerStatus.EMERGING,
    LayerStatus.DEVELOPED,
    LayerStatus.INTEGRATED,
]


class UserValidation(Enum):
    """User feedback on a layer, written by the presentation layer."""
    RESONATES = "resonates"
    NOT_SURE = "not_sure"
    DOESNT_FIT = "doesnt_fit"
