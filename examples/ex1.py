import logging

from pnetpy.net.execution import Execution
from pnetpy.net.petrinet import PetriNet, Transition

logging.basicConfig(level=logging.DEBUG)

#                2 - 4
#              /  (1)  \
#  start -> 1 -(0)   (3)- 6
#              \  (2)  /
#                3 - 5
net = PetriNet([
    Transition([1], [2, 3]),
    Transition([2], [4]),
    Transition([3], [5]),
    Transition([4, 5], [6]),
])
print(net)

e = Execution.from_net(net)
print(e, "enabled:", e.enabled_transitions())

for t in [0, 2, 3, 1, 3]:
    e = e.fire(t)
    print(f"fire({t}) ->", e, "enabled:", e.enabled_transitions())

print("Terminal?", e.is_terminal())
