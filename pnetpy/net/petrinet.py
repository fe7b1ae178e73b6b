from typing import Iterable, Optional, Tuple

# A place is identified by its 1-based integer id
Places = Tuple[int, ...]


# -----------------------------------------------------------------------------------
# Transition
# -----------------------------------------------------------------------------------
class Transition:
    """
    Consumes a token from every place in ``consume`` and produces a token in every
    place in ``produce``. A place may appear in both.
    """

    __slots__ = ("_consume", "_produce")

    def __init__(self, consume: Iterable[int], produce: Iterable[int]):
        consume = tuple(consume)
        produce = tuple(produce)
        for place in consume + produce:
            if isinstance(place, bool) or not isinstance(place, int) or place < 1:
                raise ValueError(f"Place ids must be positive integers, got {place!r}")
        self._consume = consume
        self._produce = produce

    @property
    def consume(self) -> Places:
        return self._consume

    @property
    def produce(self) -> Places:
        return self._produce

    def places(self) -> Places:
        return self._consume + self._produce

    def __eq__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        return self._consume == other._consume and self._produce == other._produce

    def __hash__(self):
        return hash((self._consume, self._produce))

    def __repr__(self):
        return f"Transition(consume={list(self._consume)}, produce={list(self._produce)})"


# -----------------------------------------------------------------------------------
# PetriNet
# -----------------------------------------------------------------------------------
class PetriNet:
    """
    Ordered, immutable collection of transitions of a 1-safe net. The position of a
    transition is its identity when asking an Execution about enablement or firing.
    """

    __slots__ = ("_transitions",)

    def __init__(self, transitions: Iterable[Transition]):
        self._transitions: Tuple[Transition, ...] = tuple(transitions)

    @classmethod
    def from_partition(cls, partition) -> "PetriNet":
        from pnetpy.net.partition import ValidPartition, decode_partition

        if not isinstance(partition, ValidPartition):
            raise TypeError("PetriNet.from_partition requires a ValidPartition, use ValidPartition.new first")
        return cls(decode_partition(partition.values))

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return self._transitions

    def place_count(self) -> int:
        # at least one place, which holds the initial token
        count = 1
        for t in self._transitions:
            for place in t.places():
                count = max(count, place)
        return count

    def transition(self, index: int) -> Optional[Transition]:
        if 0 <= index < len(self._transitions):
            return self._transitions[index]
        return None

    def transition_count(self) -> int:
        return len(self._transitions)

    def __eq__(self, other):
        if not isinstance(other, PetriNet):
            return NotImplemented
        return self._transitions == other._transitions

    def __hash__(self):
        return hash(self._transitions)

    def __repr__(self):
        transitions_str = "\n    ".join(f"{i}: {t!r}" for i, t in enumerate(self._transitions))
        return (f"PetriNet(places={self.place_count()}\n"
                f"  Transitions:\n    {transitions_str}\n)")
