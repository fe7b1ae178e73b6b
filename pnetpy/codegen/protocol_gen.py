import keyword
import logging
import re
from typing import List, Sequence, Set

from pnetpy.protocol.importer import NamedProtocol

logger = logging.getLogger(__name__)

TARGET_TYPE = "BagOfFuns"


def to_identifier(name: str) -> str:
    """
    Turn a transition or protocol name into a valid Python identifier.
    """
    ident = re.sub(r"\W", "_", name.strip())
    if not ident or ident[0].isdigit():
        ident = "_" + ident
    if keyword.iskeyword(ident):
        ident = ident + "_"
    return ident


def type_param(place: int) -> str:
    return f"T{place:02}"


def placeholder_type(place: int) -> str:
    return f"A{type_param(place)}"


def reserved_names(places: Sequence[int]) -> Set[str]:
    """
    Names bound at module level by the generated code. A class or method with one of
    these names would shadow it for the annotations that follow.
    """
    names = {"Protocol", "Tuple", "TypeVar", TARGET_TYPE}
    for place in places:
        names.add(type_param(place))
        names.add(placeholder_type(place))
    return names


def method_names(names: Sequence[str], reserved: Set[str]) -> List[str]:
    """
    One distinct method name per transition. Names that repeat an earlier one, or clash
    with a generated symbol or a dunder, get the transition index appended.
    """
    used: Set[str] = set()
    result = []
    for index, name in enumerate(names):
        ident = to_identifier(name)
        dunder = ident.startswith("__") and ident.endswith("__")
        if ident in used or ident in reserved or dunder:
            if dunder:
                ident = ident.strip("_") or "t"
            ident = f"{ident}_{index}"
            while ident in used or ident in reserved:
                ident = ident + "_"
        used.add(ident)
        result.append(ident)
    return result


def protocol_class_name(name: str, reserved: Set[str]) -> str:
    class_name = to_identifier(re.sub(r"\s", "", name))
    while class_name in reserved:
        class_name = class_name + "_"
    return class_name


def _tuple_expr(items: Sequence[str]) -> str:
    if len(items) == 1:
        return f"({items[0]},)"
    return f"({', '.join(items)})"


def _tuple_type(items: Sequence[str]) -> str:
    if not items:
        return "Tuple[()]"
    return f"Tuple[{', '.join(items)}]"


def _signature(fn_name: str, consume: Sequence[int], produce: Sequence[int], type_name) -> str:
    ins = "".join(f", a{i:02}: {type_name(place)}" for i, place in enumerate(consume))
    outs = _tuple_type([type_name(place) for place in produce])
    return f"    def {fn_name}(self{ins}) -> {outs}:"


def render_interface(protocol: NamedProtocol) -> str:
    """
    Render a Python module declaring the protocol as a generic typing.Protocol, with one
    method per transition (one argument per consumed place, a tuple of produced places
    as result), plus a ``BagOfFuns`` class implementing every method with placeholders.
    """
    net = protocol.petrinet()
    places = protocol.partition.unique_sorted_places()
    reserved = reserved_names(places)
    class_name = protocol_class_name(protocol.name, reserved)

    lines: List[str] = ["# Auto-generated file using pnetpy", "from typing import Protocol, Tuple, TypeVar", ""]
    for place in places:
        lines.append(f"{type_param(place)} = TypeVar(\"{type_param(place)}\")")
    lines.extend(["", ""])

    if places:
        lines.append(f"class {class_name}(Protocol[{', '.join(type_param(p) for p in places)}]):")
    else:
        lines.append(f"class {class_name}(Protocol):")
    fn_names = method_names(protocol.names, reserved)
    for fn_name, tr in zip(fn_names, net.transitions):
        lines.append(_signature(fn_name, tr.consume, tr.produce, type_param))
        lines.append("        ...")
        lines.append("")
    if not fn_names:
        lines.append("    pass")
        lines.append("")

    for place in places:
        lines.append("")
        lines.append(f"class {placeholder_type(place)}:")
        lines.append("    pass")
        lines.append("")

    lines.append("")
    lines.append(f"class {TARGET_TYPE}:")
    for fn_name, tr in zip(fn_names, net.transitions):
        lines.append(_signature(fn_name, tr.consume, tr.produce, placeholder_type))
        lines.append(f"        return {_tuple_expr([placeholder_type(p) + '()' for p in tr.produce])}")
        lines.append("")
    if not fn_names:
        lines.append("    pass")
        lines.append("")

    return "\n".join(lines)


def write_interface(protocol: NamedProtocol, output_py_path: str) -> str:
    source = render_interface(protocol)
    with open(output_py_path, "w") as f:
        f.write(source)
    logger.info("Wrote interface for protocol '%s' to %s", protocol.name, output_py_path)
    return source
