"""Tests for generating the Python interface of a protocol"""

import pytest

from pnetpy.codegen.protocol_gen import render_interface, to_identifier, write_interface
from pnetpy.protocol.importer import NamedProtocol, TransitionNameMismatch, import_protocol_from_file

TINY_SWAP = '''\
# Auto-generated file using pnetpy
from typing import Protocol, Tuple, TypeVar

T01 = TypeVar("T01")
T02 = TypeVar("T02")
T03 = TypeVar("T03")


class TinySwap(Protocol[T01, T02, T03]):
    def lock(self, a00: T01) -> Tuple[T02, T03]:
        ...

    def claim(self, a00: T02, a01: T03) -> Tuple[()]:
        ...


class AT01:
    pass


class AT02:
    pass


class AT03:
    pass


class BagOfFuns:
    def lock(self, a00: AT01) -> Tuple[AT02, AT03]:
        return (AT02(), AT03())

    def claim(self, a00: AT02, a01: AT03) -> Tuple[()]:
        return ()
'''


@pytest.fixture
def tiny_swap():
    return NamedProtocol("Tiny Swap", ["lock", "claim"], [1, 0, 2, 3, 0, 2, 3, 0, 0])


def load_module(source):
    namespace = {}
    exec(compile(source, "<generated>", "exec"), namespace)
    return namespace


def test_render_tiny_swap(tiny_swap):
    assert render_interface(tiny_swap) == TINY_SWAP


def test_generated_module_runs(tiny_swap):
    ns = load_module(render_interface(tiny_swap))
    bag = ns["BagOfFuns"]()
    produced = bag.lock(ns["AT01"]())
    assert isinstance(produced[0], ns["AT02"])
    assert isinstance(produced[1], ns["AT03"])
    assert bag.claim(*produced) == ()


def test_single_output_is_a_tuple():
    protocol = NamedProtocol("p", ["step"], [1, 0, 2, 0])
    ns = load_module(render_interface(protocol))
    result = ns["BagOfFuns"]().step(ns["AT01"]())
    assert isinstance(result, tuple) and len(result) == 1


def test_swap_protocol(swap_protocol_path):
    source = render_interface(import_protocol_from_file(swap_protocol_path))
    assert "class SwapProtocol(Protocol[T01, T02, T03," in source
    assert "    def redeem_alice(self, a00: T02, a01: T15) -> Tuple[T03, T16]:" in source
    assert "T19 = TypeVar(\"T19\")" in source
    ns = load_module(source)
    assert callable(ns["BagOfFuns"]().refund_bob)


def test_empty_protocol():
    ns = load_module(render_interface(NamedProtocol("Empty", [], [])))
    assert "Empty" in ns
    assert "BagOfFuns" in ns


def test_name_mismatch_is_rejected():
    with pytest.raises(TransitionNameMismatch):
        render_interface(NamedProtocol("p", ["a"], []))


@pytest.mark.parametrize("name,expected", [
    ("redeem-alice", "redeem_alice"),
    ("2fast", "_2fast"),
    ("class", "class_"),
    (" lock ", "lock"),
])
def test_to_identifier(name, expected):
    assert to_identifier(name) == expected


def test_write_interface(tmp_path, tiny_swap):
    out = tmp_path / "protocol.py"
    write_interface(tiny_swap, str(out))
    assert out.read_text() == TINY_SWAP


# =============================================================================
# Name collisions
# =============================================================================

def public_methods(cls):
    return [n for n in vars(cls) if not n.startswith("_") and callable(vars(cls)[n])]


def test_repeated_transition_names_keep_every_method():
    protocol = NamedProtocol("p", ["step", "step"], [1, 0, 2, 0, 2, 0, 3, 0])
    ns = load_module(render_interface(protocol))
    bag = ns["BagOfFuns"]
    assert public_methods(bag) == ["step", "step_1"]
    assert public_methods(ns["p"]) == ["step", "step_1"]
    (p2,) = bag().step(ns["AT01"]())
    assert isinstance(p2, ns["AT02"])
    (p3,) = bag().step_1(p2)
    assert isinstance(p3, ns["AT03"])


def test_names_equal_after_conversion_are_distinct():
    protocol = NamedProtocol("p", ["a-b", "a_b", "a_b_1"], [1, 0, 2, 0, 2, 0, 3, 0, 3, 0, 1, 0])
    ns = load_module(render_interface(protocol))
    assert public_methods(ns["BagOfFuns"]) == ["a_b", "a_b_1", "a_b_1_2"]


@pytest.mark.parametrize("name", ["Tuple", "Protocol", "TypeVar", "BagOfFuns", "T01", "AT02"])
def test_protocol_name_does_not_shadow_generated_symbols(name):
    source = render_interface(NamedProtocol(name, ["step"], [1, 0, 2, 0]))
    assert f"class {name}_(Protocol[T01, T02]):" in source
    ns = load_module(source)
    (produced,) = ns["BagOfFuns"]().step(ns["AT01"]())
    assert isinstance(produced, ns["AT02"])


@pytest.mark.parametrize("name,expected", [
    ("Tuple", "Tuple_0"),
    ("T02", "T02_0"),
    ("AT01", "AT01_0"),
    ("__init__", "init_0"),
])
def test_transition_name_does_not_shadow_generated_symbols(name, expected):
    source = render_interface(NamedProtocol("p", [name, "next"], [1, 0, 2, 0, 2, 0, 1, 0]))
    ns = load_module(source)
    bag = ns["BagOfFuns"]()
    (produced,) = getattr(bag, expected)(ns["AT01"]())
    assert isinstance(produced, ns["AT02"])
    assert isinstance(bag.next(produced)[0], ns["AT01"])
