from __future__ import annotations

from typing import Dict
import pandas as pd
import plotly.graph_objects as go

from .rental import ComparisonOutcome


def balance_curve(schedule: pd.DataFrame, title: str = "Remaining balance") -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(x=schedule["month"], y=schedule["balance"], mode="lines", name="Balance")
    )
    fig.update_layout(title=title, xaxis_title="Payment #", yaxis_title="$")
    return fig


def yearly_breakdown_bars(yearly_df: pd.DataFrame, title: str = "Principal vs interest per year") -> go.Figure:
    fig = go.Figure()
    fig.add_bar(x=yearly_df["year"], y=yearly_df["principal"], name="Principal")
    fig.add_bar(x=yearly_df["year"], y=yearly_df["interest"], name="Interest")
    fig.update_layout(barmode="stack", title=title, xaxis_title="Year", yaxis_title="$")
    return fig


def comparison_bars(outcome: ComparisonOutcome, title: str = "Property comparison") -> go.Figure:
    """Grouped bars of the percentage metrics of two properties."""
    labels = ["Cash-on-cash (%)", "Cap rate (%)"]
    series: Dict[str, list] = {
        "Property 1": [outcome.first.coc, outcome.first.cap_rate],
        "Property 2": [outcome.second.coc, outcome.second.cap_rate],
    }
    fig = go.Figure()
    for name, ys in series.items():
        fig.add_bar(x=labels, y=ys, name=name)
    fig.update_layout(barmode="group", title=title, yaxis_title="%")
    return fig
