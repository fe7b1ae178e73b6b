from typing import List, Optional, Sequence, Union

from pnetpy.net.execution import Execution


def transition_label(t: int, names: Optional[Sequence[str]] = None) -> str:
    if names is not None and t < len(names):
        return names[t]
    return f"t{t}"


def get_enabled_transitions(execution: Execution, names: Optional[Sequence[str]] = None) -> List[str]:
    """
    Labels of the transitions enabled in the current marking, in net order.
    """
    return [transition_label(t, names) for t in execution.enabled_transitions()]


def resolve_transition(name_or_index: Union[str, int], names: Optional[Sequence[str]] = None) -> Optional[int]:
    if isinstance(name_or_index, int):
        return name_or_index
    if names is not None and name_or_index in names:
        return list(names).index(name_or_index)
    # fall back to the default "t<index>" labels
    if name_or_index.startswith("t") and name_or_index[1:].isdigit():
        return int(name_or_index[1:])
    return None


def step_transition(execution: Execution, name_or_index: Union[str, int],
                    names: Optional[Sequence[str]] = None) -> Execution:
    """
    Fire the given transition. Unknown or disabled transitions leave the execution as it is.
    """
    t = resolve_transition(name_or_index, names)
    if t is None:
        return execution
    return execution.fire(t)


def describe_marking(execution: Execution) -> str:
    marked = execution.marked_places()
    if not marked:
        return "Marking: (empty)"
    return "Marking: " + ", ".join(f"P{p:02}" for p in marked)
