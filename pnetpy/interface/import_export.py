import streamlit as st
import json

from jsonschema.exceptions import ValidationError

from pnetpy.codegen.protocol_gen import render_interface
from pnetpy.net.execution import Execution
from pnetpy.net.partition import InvalidPlaceNumbering
from pnetpy.protocol.exporter import export_protocol_to_json
from pnetpy.protocol.importer import TransitionNameMismatch, import_protocol_from_json


def import_protocol_ui():
    """
    Renders a file uploader for importing a protocol from JSON. On successful import,
    updates st.session_state['protocol'], st.session_state['net'] and
    st.session_state['execution'].
    """
    st.subheader("Import protocol from JSON")

    uploaded_file = st.file_uploader("Choose a protocol JSON file", type=["json"])
    if uploaded_file is not None:
        try:
            file_content = uploaded_file.read().decode("utf-8")
            data = json.loads(file_content)

            protocol = import_protocol_from_json(data)
            net = protocol.petrinet()

            st.session_state["protocol"] = protocol
            st.session_state["net"] = net
            st.session_state["execution"] = Execution.from_net(net)
            st.success(f"Protocol '{protocol.name}' imported successfully!")
        except json.JSONDecodeError as e:
            st.error(f"File is not valid JSON: {e}")
        except ValidationError as e:
            st.error(f"Protocol JSON does not match the schema: {e.message}")
        except (InvalidPlaceNumbering, TransitionNameMismatch) as e:
            st.error(f"Failed to import protocol: {e}")


def export_protocol_ui():
    """
    Renders download buttons for the current protocol JSON and its generated
    Python interface module.
    """
    st.subheader("Export current protocol")

    protocol = st.session_state.get("protocol", None)
    if not protocol:
        st.info("No protocol found in the session state.")
        return

    filename = st.text_input("Export JSON filename", value="exported_protocol.json")
    exported_str = json.dumps(export_protocol_to_json(protocol), indent=2)
    st.download_button(
        label="Download protocol JSON",
        data=exported_str,
        file_name=filename,
        mime="application/json"
    )

    st.download_button(
        label="Download generated interface",
        data=render_interface(protocol),
        file_name="protocol_interface.py",
        mime="text/x-python"
    )
