import logging
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from pnetpy.net.petrinet import Places, Transition

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------------
class PartitionErrorKind(Enum):
    DOES_NOT_START_AT_ONE = "does_not_start_at_one"
    GAP_IN_NUMBERING = "gap_in_numbering"
    NEGATIVE_PLACE = "negative_place"


class InvalidPlaceNumbering(ValueError):
    """
    Raised when the place ids of a partition are not numbered 1, 2, ..., N.

    Attributes:
      kind: which rule was broken
      place: the offending place id
      previous: for gaps, the place id preceding the gap
    """

    def __init__(self, kind: PartitionErrorKind, place: Optional[int] = None, previous: Optional[int] = None):
        self.kind = kind
        self.place = place
        self.previous = previous
        if kind is PartitionErrorKind.GAP_IN_NUMBERING:
            msg = f"Place ids jump from {previous} to {place}; place ids must increase in steps of 1"
        elif kind is PartitionErrorKind.NEGATIVE_PLACE:
            msg = f"Partition contains negative value {place}"
        else:
            msg = f"Place ids must start at 1, lowest place id is {place}"
        super().__init__(msg)


# -----------------------------------------------------------------------------------
# Partition
# -----------------------------------------------------------------------------------
class Partition:
    """
    Flat integer encoding of a transition list.

    Groups of place ids are separated by zeros and alternate between consume and
    produce, e.g. ``[1, 0, 2, 3, 0, 2, 0, 4, 0]`` is ``[1] -> [2, 3]`` followed by
    ``[2] -> [4]``.
    """

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)

    def unique_sorted_places(self) -> Places:
        xs = sorted(set(self.values))
        # after dedup at most one zero is left, and it sorts first
        return tuple(x for x in xs if x != 0)

    def check(self):
        """
        Raise InvalidPlaceNumbering unless the referenced place ids are 1..N without gaps.
        """
        xs = sorted(set(self.values))
        if xs and xs[0] < 0:
            raise InvalidPlaceNumbering(PartitionErrorKind.NEGATIVE_PLACE, place=xs[0])
        places = self.unique_sorted_places()
        for ix, x in enumerate(places):
            if ix == 0:
                if x != 1:
                    raise InvalidPlaceNumbering(PartitionErrorKind.DOES_NOT_START_AT_ONE, place=x)
            elif x - places[ix - 1] > 1:
                raise InvalidPlaceNumbering(PartitionErrorKind.GAP_IN_NUMBERING, place=x, previous=places[ix - 1])

    def is_valid(self) -> bool:
        try:
            self.check()
        except InvalidPlaceNumbering:
            return False
        return True

    def __eq__(self, other):
        return isinstance(other, Partition) and self.values == other.values

    def __repr__(self):
        return f"Partition({self.values})"


class ValidPartition:
    """
    A partition whose place numbering has been checked. Only ``ValidPartition.new``
    should create one; ``PetriNet.from_partition`` accepts nothing else.
    """

    def __init__(self, values: Sequence[int]):
        self._values = tuple(values)

    @classmethod
    def new(cls, partition: Partition) -> "ValidPartition":
        partition.check()
        return cls(partition.values)

    @property
    def values(self):
        return self._values

    def __repr__(self):
        return f"ValidPartition({list(self._values)})"


def validate_partition(values: Iterable[int]) -> ValidPartition:
    return ValidPartition.new(Partition(values))


# -----------------------------------------------------------------------------------
# Decoding / encoding
# -----------------------------------------------------------------------------------
def decode_partition(values: Iterable[int]) -> List[Transition]:
    """
    Decode a flat partition into transitions.

    A zero while consuming switches to producing; a zero while producing closes
    the transition. A trailing group that is never closed is dropped.
    """
    consuming = True
    consume: List[int] = []
    produce: List[int] = []
    transitions: List[Transition] = []
    for value in values:
        if value == 0:
            if not consuming:
                transitions.append(Transition(consume, produce))
                consume = []
                produce = []
            consuming = not consuming
        elif consuming:
            consume.append(value)
        else:
            produce.append(value)
    if consume or produce or not consuming:
        logger.debug("Dropping unterminated trailing group consume=%s produce=%s", consume, produce)
    return transitions


def encode_partition(transitions: Iterable[Transition]) -> List[int]:
    values: List[int] = []
    for t in transitions:
        values.extend(t.consume)
        values.append(0)
        values.extend(t.produce)
        values.append(0)
    return values
