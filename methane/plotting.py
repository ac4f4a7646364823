from typing import Dict, Mapping

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .config import FOCUS_COUNTRIES, SECTOR_COLORS, SECTORS


# ============================================================
# Configuration / constants
# ============================================================

HOVER_TEMPLATE_TREEMAP = (
    "%{id}<br>"
    "Emissions: %{value:,.1f} Mt CO2-eq<extra></extra>"
)

HOVER_TEMPLATE_SCATTER = (
    "%{customdata[0]}<br>"
    "Population: %{x:,.1f} million<br>"
    "Per capita: %{y:.1f} t CO2-eq<extra></extra>"
)

FOCUS_COLOR = "#d62728"
OTHER_COLOR = "#7f7f7f"
HIGHLIGHT_COLORS: dict[str, str] = {
    "China": "#e377c2",
    "U.S.": "#1f77b4",
    "Russia": "#8c564b",
    "Brazil": "#2ca02c",
    "EU*": "#17becf",
    "Canada": "#ff7f0e",
    "Australia": "#bcbd22",
}

BASE_LAYOUT: dict = dict(
    width=1000,
    height=700,
    margin=dict(t=80, l=50, r=50, b=40),
    plot_bgcolor="#f5f7fb",
)


# ============================================================
# Chart builders
# ============================================================


def create_treemap(table: pd.DataFrame) -> go.Figure:
    """
    Treemap of emissions: one parent tile per sector, one leaf per country.

    Parameters
    ----------
    table : pd.DataFrame
        Output of :func:`methane.tables.treemap_table`.

    Returns
    -------
    go.Figure
    """
    df = table.dropna(subset=["total_emissions"])
    df = df[df["total_emissions"] > 0]
    if df.empty:
        return go.Figure()

    # Parent tiles carry no value of their own (branchvalues="remainder")
    parents = df.drop_duplicates("sector")[["sector", "sector_label"]]
    ids = list(parents["sector_label"]) + [
        f"{label}/{country}"
        for label, country in zip(df["sector_label"], df["country"])
    ]
    labels = list(parents["sector_label"]) + list(df["label"])
    parent_ids = [""] * len(parents) + list(df["sector_label"])
    values = [0.0] * len(parents) + list(df["total_emissions"])
    colors = [SECTOR_COLORS.get(s, OTHER_COLOR) for s in parents["sector"]] + [
        SECTOR_COLORS.get(s, OTHER_COLOR) for s in df["sector"]
    ]

    fig = go.Figure(
        go.Treemap(
            ids=ids,
            labels=labels,
            parents=parent_ids,
            values=values,
            branchvalues="remainder",
            marker=dict(colors=colors),
            hovertemplate=HOVER_TEMPLATE_TREEMAP,
        )
    )
    fig.update_layout(
        title="<b>Methane emissions by sector and country, 2021</b>", **BASE_LAYOUT
    )
    return fig


def create_scatter(table: pd.DataFrame) -> go.Figure:
    """
    Population vs. per-capita emissions; focus countries fully opaque.

    Rows with ``displayed == False`` are left out of the figure.
    """
    df = table[table["displayed"]]
    if df.empty:
        return go.Figure()

    colors = [
        FOCUS_COLOR if country in FOCUS_COUNTRIES else OTHER_COLOR
        for country in df["country"]
    ]
    fig = go.Figure(
        go.Scatter(
            x=df["population_millions"],
            y=df["emissions_per_capita"],
            mode="markers+text",
            text=[c if c in FOCUS_COUNTRIES else "" for c in df["country"]],
            textposition="top center",
            marker=dict(size=11, color=colors, opacity=list(df["emphasis"])),
            customdata=list(zip(df["country"])),
            hovertemplate=HOVER_TEMPLATE_SCATTER,
            showlegend=False,
        )
    )
    fig.update_xaxes(title_text="Population (millions)", type="log")
    fig.update_yaxes(title_text="Methane emissions per capita (t CO2-eq)", rangemode="tozero")
    fig.update_layout(
        title="<b>Population and per-capita methane emissions, 2021</b>", **BASE_LAYOUT
    )
    return fig


def create_column_chart(table: pd.DataFrame) -> go.Figure:
    """
    Grouped columns: focus countries on the x-axis, one bar per sector.
    """
    if table.empty:
        return go.Figure()

    fig = px.bar(
        table,
        x="country",
        y="total_emissions",
        color="sector",
        barmode="group",
        category_orders={"country": FOCUS_COUNTRIES, "sector": SECTORS},
        color_discrete_map=SECTOR_COLORS,
        labels={
            "country": "",
            "total_emissions": "Emissions (Mt CO2-eq)",
            "sector": "Sector",
        },
    )
    fig.update_layout(
        title="<b>Methane emissions of the focus countries by sector, 2021</b>",
        legend=dict(orientation="h", x=0.5, y=1.02, xanchor="center", yanchor="bottom"),
        **BASE_LAYOUT,
    )
    return fig


def create_highlight_map(table: pd.DataFrame) -> go.Figure:
    """
    World map shading the highlighted countries by the entity they belong to.
    """
    fig = px.choropleth(
        table,
        locations="iso3",
        locationmode="ISO-3",
        color="group",
        hover_name="country",
        category_orders={"group": FOCUS_COUNTRIES},
        color_discrete_map=HIGHLIGHT_COLORS,
    )
    fig.update_geos(showcountries=True, countrycolor="#c7c7c7", showframe=False)
    fig.update_layout(
        title="<b>Focus countries</b>",
        legend_title_text="",
        **BASE_LAYOUT,
    )
    return fig


def create_figures(payload: Mapping[str, object]) -> Dict[str, go.Figure]:
    """Build all four preview figures from a pipeline payload."""
    return {
        "treemap": create_treemap(payload["treemap"]),
        "scatter": create_scatter(payload["scatter"]),
        "columns": create_column_chart(payload["columns"]),
        "map": create_highlight_map(payload["map"]),
    }
