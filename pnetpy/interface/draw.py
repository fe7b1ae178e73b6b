from typing import Optional, Sequence

import graphviz
from graphviz import Digraph

from pnetpy.interface.simulation import transition_label
from pnetpy.net.execution import Execution
from pnetpy.net.petrinet import PetriNet


def draw_petrinet(net: PetriNet, execution: Optional[Execution] = None,
                  names: Optional[Sequence[str]] = None) -> Digraph:
    """
    Graphviz drawing of the net. Places are circles (filled when they hold a token in
    the given execution), transitions are boxes (highlighted when enabled).
    """
    dot = Digraph("PetriNet")
    dot.attr(rankdir="LR")

    for place in range(1, net.place_count() + 1):
        if execution is not None and execution.has_token(place):
            dot.node(f"p{place}", label=f"P{place:02}\\n●", shape="circle", style="filled", fillcolor="lightblue")
        else:
            dot.node(f"p{place}", label=f"P{place:02}", shape="circle")

    for t, tr in enumerate(net.transitions):
        # transition names are shown literally, backslashes included
        label = graphviz.escape(transition_label(t, names))
        if execution is not None and execution.enabled(t):
            dot.node(f"t{t}", label=label, shape="box", style="filled", fillcolor="palegreen")
        else:
            dot.node(f"t{t}", label=label, shape="box")
        for place in tr.consume:
            dot.edge(f"p{place}", f"t{t}")
        for place in tr.produce:
            dot.edge(f"t{t}", f"p{place}")

    return dot
