import logging
from typing import Iterable, List, Tuple

from pnetpy.net.petrinet import PetriNet

logger = logging.getLogger(__name__)

Marking = Tuple[bool, ...]


class Execution:
    """
    A net together with its current marking.

    The net is shared and never modified. The marking has one boolean per place
    (index ``place - 1``) and is replaced, never mutated: ``fire`` returns a new
    Execution.
    """

    __slots__ = ("_net", "_marking")

    def __init__(self, net: PetriNet, marking: Iterable[bool]):
        marking = tuple(bool(m) for m in marking)
        if len(marking) != net.place_count():
            raise ValueError(f"Marking has {len(marking)} places, net has {net.place_count()}")
        self._net = net
        self._marking = marking

    @classmethod
    def from_net(cls, net: PetriNet) -> "Execution":
        """Initial execution: a single token in place 1."""
        return cls(net, (True,) + (False,) * (net.place_count() - 1))

    @property
    def net(self) -> PetriNet:
        return self._net

    @property
    def marking(self) -> Marking:
        return self._marking

    def has_token(self, place: int) -> bool:
        if 1 <= place <= len(self._marking):
            return self._marking[place - 1]
        return False

    def marked_places(self) -> List[int]:
        return [ix + 1 for ix, marked in enumerate(self._marking) if marked]

    def enabled(self, t: int) -> bool:
        tr = self._net.transition(t)
        if tr is None:
            return False
        return all(self.has_token(place) for place in tr.consume)

    def enabled_transitions(self) -> List[int]:
        return [t for t in range(self._net.transition_count()) if self.enabled(t)]

    def is_terminal(self) -> bool:
        return not self.enabled_transitions()

    def fire(self, t: int) -> "Execution":
        if not self.enabled(t):
            logger.debug("Transition %s is not enabled in marking %s, nothing fired", t, self.marked_places())
            return self
        tr = self._net.transition(t)
        consumed = set(tr.consume)
        produced = set(tr.produce)

        new_marking = []
        for ix, has_token in enumerate(self._marking):
            place = ix + 1
            if place in produced:
                # produced, whether or not also consumed
                new_marking.append(True)
            elif place in consumed:
                new_marking.append(False)
            else:
                new_marking.append(has_token)

        fired = Execution(self._net, new_marking)
        logger.debug("Fired transition %s: %s -> %s", t, self.marked_places(), fired.marked_places())
        return fired

    def fire_sequence(self, transitions: Iterable[int]) -> "Execution":
        execution = self
        for t in transitions:
            execution = execution.fire(t)
        return execution

    def __eq__(self, other):
        if not isinstance(other, Execution):
            return NotImplemented
        return self._marking == other._marking and self._net == other._net

    def __hash__(self):
        return hash((self._net, self._marking))

    def __repr__(self):
        return f"Execution(marked_places={self.marked_places()})"
