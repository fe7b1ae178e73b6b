from jsonschema.exceptions import ValidationError
from pnetpy.net.partition import InvalidPlaceNumbering
from pnetpy.protocol.importer import import_protocol_from_file


try:
    protocol = import_protocol_from_file("swap-protocol-both.nbpt.json")
    net = protocol.petrinet()
    print(f"Protocol '{protocol.name}' is valid: {net.transition_count()} transitions, {net.place_count()} places.")
except ValidationError as e:
    print("JSON data is invalid.")
    print(f"Error message: {e.message}")
except InvalidPlaceNumbering as e:
    print("Partition is invalid.")
    print(f"Error ({e.kind.value}): {e}")
