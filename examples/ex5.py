from pnetpy.codegen.protocol_gen import write_interface
from pnetpy.protocol.importer import import_protocol_from_file

protocol = import_protocol_from_file("swap-protocol-both.nbpt.json")
source = write_interface(protocol, "protocol_interface.py")
print(source)
