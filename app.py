import streamlit as st
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from classical.knapsack_dp import solve, dp_table, selection_totals, KnapsackInputError
from data.generator import gen_items
from data.sample_items import SUITES, iter_suite
from utils.resources import estimate_table_resources
from utils.benchmark import run_suite, sweep_generated
from utils.validate import check_selection, SelectionCheckError

HEATMAP_MAX_CELLS = 40_000

st.set_page_config(page_title="Knapsack DP Explorer", layout="wide")

st.title("Knapsack DP Explorer")
st.caption("Exact 0/1 knapsack • bottom-up DP • backward reconstruction • golden fixtures")


def init_state():
    if "generated" not in st.session_state:
        st.session_state.generated = False
        st.session_state.source = None
        st.session_state.instance = None


init_state()


def generate_instance(source, **kwargs):
    """Create and store (items, capacity, expected) in session_state. Only called on Generate."""
    if source == "Generated":
        items = gen_items(kwargs["n"], kwargs["avg_weight"], kwargs["seed"])
        capacity = int(kwargs["cap_ratio"] * sum(it.weight for it in items))
        st.session_state.instance = (items, capacity, None)
    else:
        cases = list(iter_suite(kwargs["suite"]))
        case = cases[kwargs["case_idx"]]
        st.session_state.instance = (case.items, case.max_weight, case)

    st.session_state.generated = True
    st.session_state.source = source


def require_instance():
    if not st.session_state.generated:
        st.info("Configure the instance in the sidebar, then click **Generate & Solve**.")
        return False
    return True


with st.sidebar:
    st.header("Instance")
    source = st.selectbox("Source", ["Generated", "Fixture"], index=0)

    if source == "Generated":
        seed = st.number_input("Seed", value=42, min_value=0, max_value=2**32 - 1, step=1)
        n = st.slider("Items (n)", 1, 200, 20)
        avg_weight = st.slider("Average weight", 1, 200, 20)
        cap_ratio = st.slider("Capacity ratio (vs sum weights)", 0.05, 1.0, 0.5)
    else:
        suite = st.selectbox("Suite", list(SUITES), index=1)
        case_idx = st.number_input("Case", value=0, min_value=0, max_value=len(SUITES[suite]) - 1, step=1)

    parity = st.checkbox("Reference parity (stop walk at zero budget)", value=False)
    run_btn = st.button("Generate & Solve", use_container_width=True)

if run_btn:
    if source == "Generated":
        generate_instance(source, n=n, avg_weight=avg_weight, seed=int(seed), cap_ratio=cap_ratio)
    else:
        generate_instance(source, suite=suite, case_idx=int(case_idx))

def render_solution(items, capacity, case):
    try:
        selection = solve(items, capacity, parity=parity)
    except KnapsackInputError as e:
        st.error(str(e))
        return
    weight, value = selection_totals(items, selection)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Items")
        df_items = pd.DataFrame({
            "item": list(range(len(items))),
            "weight": [it.weight for it in items],
            "value": [it.value for it in items],
            "selected": selection,
        })
        st.dataframe(df_items, use_container_width=True)

    with col2:
        st.subheader("Result")
        st.json({
            "capacity": int(capacity),
            "best_value": int(value),
            "total_weight": int(weight),
            "picked_items": [i for i, s in enumerate(selection) if s],
            "parity": bool(parity),
        })
        if case is not None:
            try:
                check_selection(case, selection)
                st.success(f"Matches golden value {case.best_value}.")
            except SelectionCheckError as e:
                st.error(str(e))

        st.subheader("Table resources")
        st.json(estimate_table_resources(len(items), capacity))

    res = estimate_table_resources(len(items) + 1, capacity)
    if res["cells"] <= HEATMAP_MAX_CELLS:
        table = dp_table(items, capacity, parity=parity)
        fig, ax = plt.subplots(figsize=(8.0, 4.0))
        im = ax.imshow(table, aspect="auto", origin="lower", interpolation="nearest")
        ax.set_xlabel("budget c")
        ax.set_ylabel("items considered i")
        ax.set_title("best value T[i][c]")
        fig.colorbar(im, ax=ax, shrink=0.85)
        st.pyplot(fig)
    else:
        st.caption(f"DP table heatmap skipped ({res['cells']} cells > {HEATMAP_MAX_CELLS}).")


tab_solve, tab_bench = st.tabs(["Solve", "Benchmark"])

with tab_solve:
    if require_instance():
        render_solution(*st.session_state.instance)

with tab_bench:
    st.subheader("Golden suites")
    bench_suite = st.selectbox("Suite to run", list(SUITES), index=1, key="bench_suite")
    if st.button("Run suite", type="primary", key="run_suite"):
        with st.spinner(f"Solving {bench_suite}…"):
            df = run_suite(list(iter_suite(bench_suite)), suite=bench_suite)
        st.dataframe(df, use_container_width=True)
        if df["ok"].all():
            st.success(f"All {len(df)} cases passed.")
        else:
            st.error(f"{int((~df['ok']).sum())} of {len(df)} cases failed.")
        st.bar_chart(df.set_index("case")[["seconds"]])

    st.subheader("Scaling sweep")
    n_range = st.slider("Item counts", 10, 500, (20, 200), step=10)
    steps = st.slider("Points", 2, 8, 4)
    trials = st.slider("Trials per point", 1, 5, 2)
    sweep_avg = st.slider("Average weight (sweep)", 5, 200, 40)
    if st.button("Run sweep", key="run_sweep"):
        counts = sorted({int(x) for x in np.linspace(n_range[0], n_range[1], steps)})
        df = sweep_generated(counts, avg_weight=sweep_avg, trials=trials, seed=42)
        st.dataframe(df, use_container_width=True)
        g = df.groupby("n")[["seconds", "working_mb"]].mean().reset_index()
        st.markdown("**Mean solve time vs n**")
        st.line_chart(g, x="n", y="seconds", height=220)
        st.markdown("**Working memory (MB) vs n**")
        st.line_chart(g, x="n", y="working_mb", height=220)
