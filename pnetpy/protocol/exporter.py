import json
import logging
from typing import Any, Dict, Optional, Sequence

from pnetpy.protocol.importer import NamedProtocol, TransitionNameMismatch
from pnetpy.net.partition import encode_partition
from pnetpy.net.petrinet import PetriNet

logger = logging.getLogger(__name__)


def protocol_from_net(name: str, names: Sequence[str], net: PetriNet) -> NamedProtocol:
    """
    Describe an existing net as a NamedProtocol, encoding its transitions back into a
    partition.
    """
    if len(names) != net.transition_count():
        raise TransitionNameMismatch(len(names), net.transition_count())
    return NamedProtocol(name, names, encode_partition(net.transitions))


def export_protocol_to_json(protocol: NamedProtocol, output_json_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Return the JSON structure of the protocol, writing it to output_json_path when given.
    """
    final_json = protocol.to_json()

    if output_json_path is not None:
        with open(output_json_path, "w") as f:
            json.dump(final_json, f, indent=2)
        logger.info("Exported protocol '%s' to %s", protocol.name, output_json_path)

    return final_json
