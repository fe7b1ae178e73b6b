from pnetpy.analysis.reachability import build_reachability_graph, terminal_markings
from pnetpy.protocol.importer import import_protocol_from_file

protocol = import_protocol_from_file("swap-protocol-both.nbpt.json")
net = protocol.petrinet()

RG = build_reachability_graph(net, names=protocol.names, parameters={"max_states": 5000})

print("Markings:", RG.number_of_nodes())
print("Edges:", RG.number_of_edges())

print("\nTerminal markings:")
for key in terminal_markings(RG):
    print(RG.nodes[key]["execution"])

print("\nEdges:")
for src, tgt, data in RG.edges(data=True):
    print(RG.nodes[src]["execution"].marked_places(), "--", data["name"], "->",
          RG.nodes[tgt]["execution"].marked_places())
