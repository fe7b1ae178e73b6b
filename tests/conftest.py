"""Shared fixtures for pnetpy tests"""

import os

import pytest

from pnetpy.net.petrinet import PetriNet, Transition

FILES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "files")


@pytest.fixture
def diamond_net():
    # transition i represented as (i), place j as j
    #
    #                2 - 4
    #              /  (1)  \
    #  start -> 1 -(0)   (3)- 6
    #              \  (2)  /
    #                3 - 5
    return PetriNet([
        Transition([1], [2, 3]),
        Transition([2], [4]),
        Transition([3], [5]),
        Transition([4, 5], [6]),
    ])


@pytest.fixture
def swap_protocol_path():
    return os.path.join(FILES_DIR, "swap-protocol-both.nbpt.json")


@pytest.fixture
def swap_transitions():
    return [
        Transition([2, 15], [3, 16]),
        Transition([1, 6], [2, 11]),
        Transition([2, 4], [19]),
        Transition([7], [4, 5]),
        Transition([5], [6]),
        Transition([8, 9], [7]),
        Transition([10], [8, 9]),
        Transition([19], [3]),
        Transition([19], [1, 18]),
        Transition([13, 11], [12, 14]),
        Transition([14], [15]),
        Transition([12, 16], [17]),
        Transition([12, 18], [13]),
    ]
