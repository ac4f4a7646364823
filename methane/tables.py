"""Shape the four chart tables handed to the renderer.

No further numeric computation happens here: each function selects,
labels and orders rows of the aggregated or enriched tables.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import pandas as pd

from .config import (
    BLANK_LABELS,
    EMPHASIS_FOCUS,
    EMPHASIS_OTHER,
    FOCUS_COUNTRIES,
    MAP_HIGHLIGHT,
    PER_CAPITA_CUTOFF,
    SECTORS,
)

logger = logging.getLogger(__name__)


def sector_label(sector: str, share_pct) -> str:
    """Sector name annotated with its world share, e.g. ``"Energy (40%)"``."""
    if pd.isna(share_pct):
        return sector
    return f"{sector} ({int(share_pct)}%)"


def treemap_table(
    long: pd.DataFrame,
    world_totals: pd.DataFrame,
    blank_labels: List[str] = BLANK_LABELS,
) -> pd.DataFrame:
    """Long (country, sector) table with display labels for the treemap.

    Returns
    -------
    pd.DataFrame
        Columns ``country``, ``sector``, ``total_emissions``,
        ``sector_label`` and ``label``.  ``label`` is blank for the
        countries in ``blank_labels``; ``country`` itself is untouched.
    """
    labels = {
        row.sector: sector_label(row.sector, row.share_pct)
        for row in world_totals.itertuples(index=False)
    }
    table = long[["country", "sector", "total_emissions"]].copy()
    table["sector_label"] = table["sector"].map(labels).fillna(table["sector"])
    table["label"] = table["country"].where(~table["country"].isin(blank_labels), "")
    return table.reset_index(drop=True)


def scatter_table(
    wide: pd.DataFrame,
    focus: List[str] = FOCUS_COUNTRIES,
    *,
    emphasis_focus: float = EMPHASIS_FOCUS,
    emphasis_other: float = EMPHASIS_OTHER,
    cutoff: float = PER_CAPITA_CUTOFF,
) -> pd.DataFrame:
    """Per-country table for the population vs. per-capita scatterplot.

    Adds ``emphasis`` (marker opacity: ``emphasis_focus`` for focus
    countries, ``emphasis_other`` otherwise) and ``displayed``, which is
    False for rows above the per-capita ``cutoff`` or without a per-capita
    value.  No rows are dropped.
    """
    table = wide.copy()
    is_focus = table["country"].isin(focus)
    table["emphasis"] = is_focus.map({True: emphasis_focus, False: emphasis_other}).astype(
        "float64"
    )
    per_capita = table["emissions_per_capita"]
    table["displayed"] = per_capita.notna() & ~(per_capita > cutoff)

    hidden = table.loc[per_capita > cutoff, "country"].tolist()
    if hidden:
        logger.info("Not displayed (per capita above %s): %s", cutoff, hidden)
    return table.reset_index(drop=True)


def column_chart_table(
    long: pd.DataFrame,
    focus: List[str] = FOCUS_COUNTRIES,
    sectors: List[str] = SECTORS,
) -> pd.DataFrame:
    """Focus-country emissions by sector in fixed display order.

    ``country`` and ``sector`` become ordered categoricals following
    ``focus`` and ``sectors``; rows are sorted by them.
    """
    table = long.loc[long["country"].isin(focus), ["country", "sector", "total_emissions"]]
    table = table.assign(
        country=pd.Categorical(table["country"], categories=focus, ordered=True),
        sector=pd.Categorical(table["sector"], categories=sectors, ordered=True),
    )
    return table.sort_values(["country", "sector"]).reset_index(drop=True)


def map_highlight_table(
    highlight: List[Tuple[str, str, str]] = MAP_HIGHLIGHT,
) -> pd.DataFrame:
    """Static list of boundary-dataset countries to shade on the world map."""
    return pd.DataFrame(highlight, columns=["country", "iso3", "group"])
