import logging

from pnetpy.net.execution import Execution
from pnetpy.protocol.importer import import_protocol_from_file

logging.basicConfig(level=logging.INFO)

protocol = import_protocol_from_file("swap-protocol-both.nbpt.json")
net = protocol.petrinet()
print(protocol)
print(net)

# Fire the first enabled transition until the net gets stuck
e = Execution.from_net(net)
for _ in range(20):
    enabled = e.enabled_transitions()
    if not enabled:
        break
    t = enabled[0]
    e = e.fire(t)
    print(f"{protocol.names[t]:>15} -> marked places {e.marked_places()}")
