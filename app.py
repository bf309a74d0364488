"""
Page Replacement Visualizer — FIFO, OPT & LRU

This application provides an interactive simulation and visualization of
page replacement over a fixed number of physical frames:
    - Frame table state after every reference
    - Hits, faults and the victim frame of every replacement
    - Page Replacement Algorithms (FIFO, OPT, LRU)
    - Side-by-side policy comparison and fault curves (Belady's anomaly)

Built with Streamlit for the web interface and Plotly for visualizations.
The simulation itself lives in engine.py; this file only displays traces.

Run with:  streamlit run app.py
"""

# =============================================================================
# IMPORTS
# =============================================================================

import time                                  # For timing/pacing the playback
from typing import List                      # Type hints for better code clarity

import streamlit as st                       # Web application framework
import plotly.graph_objects as go            # Interactive plotting library

from engine import InvalidConfiguration, ReplacementPolicy, SimulationTrace, simulate
from report import compare_policies, event_log, fault_curve, get_stats, trace_rows
from utils import (
    DEFAULT_FRAME_COUNT,
    DEFAULT_REFERENCE_STRING,
    MAX_FRAME_COUNT,
    get_color,
    parse_reference_string,
)


# =============================================================================
# CHART BUILDERS
# =============================================================================

def frame_grid_figure(trace: SimulationTrace, upto: int) -> go.Figure:
    """
    Heatmap of the frame table over time.

    Columns are steps, rows are frames. A cell is gray while the frame is
    free, green while it holds a page, and red on the step where the frame
    received a page because of a fault.
    """
    entries = trace.entries[:upto]
    frame_labels = [f"F{i}" for i in range(trace.frame_count)]

    z: List[List[int]] = [[0] * len(entries) for _ in range(trace.frame_count)]
    text: List[List[str]] = [[""] * len(entries) for _ in range(trace.frame_count)]

    for col, e in enumerate(entries):
        for row, page in enumerate(e.frames):
            if page is None:
                continue
            z[row][col] = 1
            text[row][col] = str(page)
        if not e.hit:
            z[e.frame_no][col] = 2

    fig = go.Figure(go.Heatmap(
        z=z,
        x=[f"{e.step}:{e.page_no}" for e in entries],
        y=frame_labels,
        text=text,
        texttemplate="%{text}",
        colorscale=[[0.0, "lightgray"], [0.5, "lightgreen"], [1.0, get_color(False)]],
        zmin=0,
        zmax=2,
        showscale=False,
        xgap=2,
        ygap=2,
    ))
    fig.update_layout(
        height=80 + 40 * trace.frame_count,
        xaxis=dict(title="step:page", type="category"),
        yaxis=dict(autorange="reversed"),
        margin=dict(t=20),
    )
    return fig


def current_frames_figure(trace: SimulationTrace, upto: int) -> go.Figure:
    """Bar per frame for the latest revealed step, colored by what happened to it."""
    fig = go.Figure()
    entry = trace.entries[upto - 1] if upto > 0 else None
    snapshot = entry.frames if entry else (None,) * trace.frame_count

    x = []      # Frame indices
    y = []      # Bar heights (all 1 for uniform display)
    text = []   # Labels for each frame
    colors = [] # Color coding: red/green=touched this step, blue=occupied, gray=free

    for frame_no, page in enumerate(snapshot):
        label = f"F{frame_no}: " + (f"P{page}" if page is not None else "Free")
        text.append(label)
        if entry is not None and frame_no == entry.frame_no:
            colors.append(get_color(entry.hit))
        else:
            colors.append("lightblue" if page is not None else "lightgray")
        x.append(frame_no)
        y.append(1)

    fig.add_trace(go.Bar(
        x=x,
        y=y,
        text=text,
        marker_color=colors,
        hovertext=text,
        hoverinfo='text'
    ))
    fig.update_layout(
        height=150,
        showlegend=False,
        yaxis=dict(showticklabels=False)
    )
    return fig


# =============================================================================
# STREAMLIT UI - Web Application Interface
# =============================================================================

st.set_page_config(page_title="Page Replacement Visualizer", layout="wide")

# Page selector for switching between Simulator and Concepts views
page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Page Replacement Visualizer — FIFO, OPT & LRU")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("Operating System Concepts Used in This Project")
    st.markdown(
        """
        ## 📘 Key Concepts

        ### **1. Frames and Reference Strings**
        - Physical memory holds a fixed number of *frames*, each able to hold one page.
        - A *reference string* is the order in which a program touches its pages.

        ### **2. Hit and Page Fault**
        - **Hit**: the referenced page is already resident in some frame.
        - **Fault**: it is not; a free frame is filled, or a resident page (the *victim*) is evicted.

        ### **3. Page Replacement Algorithms**
        When every frame is occupied, one page must go:

        #### **FIFO (First In First Out)**
        - Replace the page that entered memory earliest.
        - Suffers from **Belady's anomaly**: more frames can mean more faults.

        #### **OPT (Optimal)**
        - Replace the page whose next use is farthest in the future (or never comes).
        - Needs the whole reference string, so it is a yardstick rather than a real policy.

        #### **LRU (Least Recently Used)**
        - Replace the page that hasn't been used for the longest time.

        ### **4. Hit Ratio**
        - hits / total references; the fault rate is its complement.
        """
    )
    st.stop()  # Stop rendering - don't show simulator on Concepts page

# =============================================================================
# SIMULATOR PAGE - Main Interactive Interface
# =============================================================================

st.sidebar.header("Simulation Settings")

policy = st.sidebar.selectbox(
    "Replacement Policy",
    options=list(ReplacementPolicy.ALL)
)

frame_count = st.sidebar.number_input(
    "Frames",
    min_value=1,
    max_value=MAX_FRAME_COUNT,
    value=DEFAULT_FRAME_COUNT,
    step=1
)

access_input = st.sidebar.text_area(
    "Reference string (comma or space separated page numbers)",
    value=DEFAULT_REFERENCE_STRING
)

run_speed = st.sidebar.slider(
    "Playback speed (steps/sec)",
    min_value=0.5,
    max_value=10.0,
    value=2.0
)

# -----------------------------------------------------------------------------
# SESSION STATE - Trace Persistence
# -----------------------------------------------------------------------------

settings = (policy, int(frame_count), access_input)

try:
    references = parse_reference_string(access_input)
    if st.session_state.get("settings") != settings:
        # Settings changed: replay from scratch, nothing revealed yet
        st.session_state.trace = simulate(policy, int(frame_count), references)
        st.session_state.cursor = 0
        st.session_state.settings = settings
except InvalidConfiguration as e:
    st.error(str(e))
    st.session_state.pop("settings", None)
    st.stop()

trace: SimulationTrace = st.session_state.trace

if st.sidebar.button("Reset Playback"):
    st.session_state.cursor = 0
    st.sidebar.success("Playback reset")

st.sidebar.markdown("---")

# =============================================================================
# MAIN CONTENT AREA - Two Column Layout
# =============================================================================

col1, col2 = st.columns([1, 2])

# -----------------------------------------------------------------------------
# LEFT COLUMN - Controls and Event Log
# -----------------------------------------------------------------------------

with col1:
    st.subheader("Controls")

    if st.button("Step Once"):
        if st.session_state.cursor < len(trace):
            e = trace[st.session_state.cursor]
            st.session_state.cursor += 1
            outcome = "HIT" if e.hit else "FAULT"
            st.success(f"Accessed page {e.page_no} -> {outcome} (frame={e.frame_no})")
        else:
            st.warning("Reference string finished")

    if st.button("Run Sequence"):
        placeholder = st.empty()
        while st.session_state.cursor < len(trace):
            st.session_state.cursor += 1
            placeholder.plotly_chart(
                current_frames_figure(trace, st.session_state.cursor),
                use_container_width=True,
            )
            time.sleep(1.0 / run_speed)
        placeholder.empty()
        st.success("Sequence run finished")

    # Most recent 20 events, newest first
    st.subheader("Event Log")
    revealed = SimulationTrace(trace.policy, trace.frame_count, trace.references,
                               trace.entries[:st.session_state.cursor])
    for ev in event_log(revealed)[-20:][::-1]:
        st.write(ev)

# -----------------------------------------------------------------------------
# RIGHT COLUMN - Visualizations
# -----------------------------------------------------------------------------

with col2:
    cursor = st.session_state.cursor

    st.subheader("Physical Frames")
    st.plotly_chart(current_frames_figure(trace, cursor), use_container_width=True)

    st.subheader("Frame Table Over Time")
    if cursor == 0:
        st.write("No references processed yet — use Step Once or Run Sequence")
    else:
        st.plotly_chart(frame_grid_figure(trace, cursor), use_container_width=True)

    st.subheader("Trace")
    if cursor > 0:
        st.table(trace_rows(revealed))

    st.subheader("Statistics")
    stats = get_stats(revealed)
    m1, m2, m3 = st.columns(3)
    m1.metric("Page Accesses", stats['total_refs'])
    m2.metric("Page Faults", stats['faults'])
    m3.metric("Hit Ratio", stats['hit_ratio'])

    fig2 = go.Figure()
    fig2.add_trace(go.Bar(
        x=["Hits", "Faults"],
        y=[stats['hits'], stats['faults']],
        marker_color=[get_color(True), get_color(False)]
    ))
    fig2.update_layout(height=300, title="Hits vs Faults")
    st.plotly_chart(fig2, use_container_width=True)

# =============================================================================
# POLICY COMPARISON
# =============================================================================

st.markdown("---")
st.header("Compare Policies")

cmp_col1, cmp_col2 = st.columns(2)

with cmp_col1:
    comparison = compare_policies(trace.frame_count, trace.references)
    st.table(comparison)
    fig3 = go.Figure()
    fig3.add_trace(go.Bar(
        x=[row["policy"] for row in comparison],
        y=[row["faults"] for row in comparison],
    ))
    fig3.update_layout(height=300, title=f"Faults with {trace.frame_count} frames")
    st.plotly_chart(fig3, use_container_width=True)

with cmp_col2:
    max_frames = st.slider("Frame counts to plot", min_value=1,
                           max_value=MAX_FRAME_COUNT, value=min(8, MAX_FRAME_COUNT))
    fig4 = go.Figure()
    for p in ReplacementPolicy.ALL:
        curve = fault_curve(p, trace.references, max_frames)
        fig4.add_trace(go.Scatter(
            x=[c["frames"] for c in curve],
            y=[c["faults"] for c in curve],
            mode="lines+markers",
            name=p,
        ))
    fig4.update_layout(height=300, title="Faults vs Frames", xaxis_title="frames",
                       yaxis_title="faults")
    st.plotly_chart(fig4, use_container_width=True)

# =============================================================================
# FOOTER - Usage Tips and Examples
# =============================================================================

st.markdown("---")
st.markdown(
    "**Usage tips**:\n"
    "- Enter a reference string and click **Step Once** or **Run Sequence**.\n"
    "- Changing the policy, frame count or reference string restarts the playback.\n"
    "- Red cells mark the frame that received a page on a fault."
)

st.markdown("---")
st.markdown(
    "**Instructor examples**:\n"
    "1) Belady's anomaly: FIFO on `1,2,3,4,1,2,5,1,2,3,4,5` gives 9 faults with 3 frames "
    "and 10 with 4 (see the fault curve).\n"
    "2) LRU demo: set policy to LRU and run `7,0,1,2,0,3,0,4,2,3,0,3,2`; page 7 is the first victim.\n"
    "3) OPT demo: run `1,2,3,4,1,2,5` with 3 frames; page 3 is evicted because it is never used again."
)
