import logging
from collections import deque
from typing import Any, Dict, List, Optional, Sequence, Set

import networkx as nx

from pnetpy.net.execution import Execution, Marking
from pnetpy.net.petrinet import PetriNet

logger = logging.getLogger(__name__)


def marking_to_key(execution: Execution) -> Marking:
    """
    Hashable key of an execution's state. Executions of the same net are the same
    state exactly when their markings are equal.
    """
    return execution.marking


def build_reachability_graph(
        net: PetriNet,
        names: Optional[Sequence[str]] = None,
        parameters: Optional[Dict[str, Any]] = None
) -> nx.DiGraph:
    """
    Build the reachability graph of the net, starting from its initial execution
    (a single token in place 1).

    The graph is explored breadth-first, firing one enabled transition at a time.

    Parameters:
      net: the Petri net
      names: optional transition names, aligned with the net's transitions
      parameters: optional settings
        - max_states: stop discovering new markings once this many are known (default: no limit)

    Returns:
      A DiGraph keyed by marking tuples. The 'execution' attribute of each node holds
      the Execution for that marking. Edges have attributes:
        - 'transition': the index of the transition fired
        - 'name': its name, when names were given
    """
    if parameters is None:
        parameters = {}
    max_states = parameters.get("max_states", None)

    RG = nx.DiGraph()
    visited: Set[Marking] = set()
    queue = deque()

    initial = Execution.from_net(net)
    init_key = marking_to_key(initial)
    RG.add_node(init_key, execution=initial)
    visited.add(init_key)
    queue.append(init_key)
    truncated = False

    while queue:
        current_key = queue.popleft()
        current = RG.nodes[current_key]["execution"]

        for t in current.enabled_transitions():
            successor = current.fire(t)
            succ_key = marking_to_key(successor)
            if succ_key not in visited:
                if max_states is not None and len(visited) >= max_states:
                    truncated = True
                    continue
                RG.add_node(succ_key, execution=successor)
                visited.add(succ_key)
                queue.append(succ_key)

            edge_attrs = {"transition": t}
            if names is not None and t < len(names):
                edge_attrs["name"] = names[t]
            RG.add_edge(current_key, succ_key, **edge_attrs)

    if truncated:
        logger.info("Reachability exploration stopped at max_states=%s", max_states)
    logger.info("Reachability graph: %d markings, %d edges", RG.number_of_nodes(), RG.number_of_edges())
    return RG


def terminal_markings(RG: nx.DiGraph) -> List[Marking]:
    """
    Markings in which no transition is enabled.
    """
    return [key for key, data in RG.nodes(data=True) if data["execution"].is_terminal()]


def is_reachable(net: PetriNet, marking: Sequence[bool], parameters: Optional[Dict[str, Any]] = None) -> bool:
    RG = build_reachability_graph(net, parameters=parameters)
    return tuple(bool(m) for m in marking) in RG
