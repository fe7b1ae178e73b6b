import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from frozendict import frozendict
from jsonschema import validate

from pnetpy.net.partition import Partition, ValidPartition
from pnetpy.net.petrinet import PetriNet

logger = logging.getLogger(__name__)

SCHEMA_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "util",
                           "validation_schema.json")


class TransitionNameMismatch(ValueError):
    def __init__(self, name_count: int, transition_count: int):
        self.name_count = name_count
        self.transition_count = transition_count
        super().__init__(
            f"Protocol has {name_count} transition names but its partition decodes to {transition_count} transitions")


class NamedProtocol:
    """
    A protocol description: a name, the names of its transitions (in net order) and
    the partition encoding of the net.
    """

    def __init__(self, name: str, names: Iterable[str], partition: Iterable[int]):
        self.name = name
        self.names: List[str] = list(names)
        self.partition = Partition(partition)

    def petrinet(self) -> PetriNet:
        """
        Validate the partition and build the net. Raises InvalidPlaceNumbering for a
        badly numbered partition and TransitionNameMismatch when the names do not line
        up with the transitions.
        """
        net = PetriNet.from_partition(ValidPartition.new(self.partition))
        if len(self.names) != net.transition_count():
            raise TransitionNameMismatch(len(self.names), net.transition_count())
        return net

    def transition_names(self) -> frozendict:
        """
        Name -> transition index. The first transition wins for repeated names.
        """
        index = {}
        for i, n in enumerate(self.names):
            index.setdefault(n, i)
        return frozendict(index)

    def index_of(self, name: str) -> Optional[int]:
        return self.transition_names().get(name)

    def to_json(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "names": list(self.names),
            "partition": list(self.partition.values)
        }

    def __repr__(self):
        return f"NamedProtocol(name='{self.name}', transitions={len(self.names)})"


def load_schema() -> Dict[str, Any]:
    with open(SCHEMA_PATH, "r") as f:
        return json.load(f)


def import_protocol_from_json(data: Dict[str, Any]) -> NamedProtocol:
    """
    Build a NamedProtocol from its JSON structure:
      {
        "name": "...",
        "names": ["...", ...],
        "partition": [1, 0, 2, 0, ...]
      }
    Raises jsonschema.exceptions.ValidationError if the structure does not conform.
    """
    validate(instance=data, schema=load_schema())
    return NamedProtocol(data["name"], data["names"], data["partition"])


def import_protocol_from_file(path: str) -> NamedProtocol:
    with open(path, "r") as f:
        data = json.load(f)
    protocol = import_protocol_from_json(data)
    logger.info("Imported protocol '%s' from %s", protocol.name, path)
    return protocol
