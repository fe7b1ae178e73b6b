import streamlit as st

from pnetpy.analysis.reachability import build_reachability_graph, terminal_markings
from pnetpy.interface.draw import draw_petrinet
from pnetpy.interface.import_export import export_protocol_ui, import_protocol_ui
from pnetpy.interface.simulation import describe_marking, get_enabled_transitions, step_transition, transition_label
from pnetpy.net.execution import Execution


def init_session_state():
    """Initialize Streamlit session state variables, if not present."""
    if "protocol" not in st.session_state:
        st.session_state["protocol"] = None
    if "net" not in st.session_state:
        st.session_state["net"] = None
    if "execution" not in st.session_state:
        st.session_state["execution"] = None


def main():
    """Main Streamlit app function for the 1-safe Petri net UI."""
    st.title("1-safe Petri Net Streamlit Interface")

    init_session_state()

    # --- SIDEBAR LAYOUT ---
    st.sidebar.header("1. Import / Export")
    with st.sidebar.expander("Import protocol", expanded=True):
        import_protocol_ui()
    with st.sidebar.expander("Export protocol"):
        export_protocol_ui()

    st.sidebar.header("2. Analysis")
    max_states = st.sidebar.number_input("Max markings to explore", min_value=1, value=10000)

    # --- MAIN AREA ---
    protocol = st.session_state["protocol"]
    net = st.session_state["net"]
    execution = st.session_state["execution"]

    if not net or not execution:
        st.warning("No net loaded. Import a protocol JSON from the sidebar first.")
        st.stop()

    names = protocol.names if protocol else None

    st.subheader(f"Protocol: {protocol.name}" if protocol else "Current net")
    st.graphviz_chart(draw_petrinet(net, execution, names))

    with st.expander("Marking Details", expanded=False):
        st.text(describe_marking(execution))

    # Simulation Controls
    st.subheader("Simulation Controls")
    enabled = execution.enabled_transitions()
    if enabled:
        st.write("Enabled transitions:", get_enabled_transitions(execution, names))
        # select by index, names may repeat
        chosen_transition = st.selectbox(
            "Choose a transition to fire",
            enabled,
            format_func=lambda t: f"{t}: {transition_label(t, names)}"
        )
        if st.button("Fire Transition"):
            st.session_state["execution"] = step_transition(execution, chosen_transition, names)
            st.rerun()
    else:
        st.write("No transitions are enabled: this marking is terminal.")

    if st.button("Reset to initial marking"):
        st.session_state["execution"] = Execution.from_net(net)
        st.rerun()

    st.subheader("Reachability")
    if st.button("Explore reachable markings"):
        RG = build_reachability_graph(net, names, parameters={"max_states": int(max_states)})
        st.write(f"**Reachable markings**: {RG.number_of_nodes()}")
        st.write(f"**Edges**: {RG.number_of_edges()}")
        terminals = terminal_markings(RG)
        st.write(f"**Terminal markings**: {len(terminals)}")
        for key in terminals:
            st.text(describe_marking(RG.nodes[key]["execution"]))


if __name__ == "__main__":
    main()
