"""Aggregate raw emission rows to world totals and per-country sector sums.

Raw rows can carry several entries per country and sector (finer-grained
segments).  World rows (no country) are summarised separately into sector
totals and shares; country rows are renamed through the EU/US remap and
summed to exactly one row per (country, sector).
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

import pandas as pd

from .config import COUNTRY_REMAP, SECTORS

logger = logging.getLogger(__name__)


def split_world_rows(df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Return ``(world, countries)``; world rows have no country."""
    is_world = df["country"].isna()
    return df.loc[is_world].copy(), df.loc[~is_world].copy()


def compute_world_totals(
    world: pd.DataFrame, value_col: str = "emissions"
) -> pd.DataFrame:
    """Sum world rows by sector and compute each sector's share.

    Parameters
    ----------
    world : pd.DataFrame
        Rows with columns ``sector`` and ``value_col``.
    value_col : str, optional
        Column holding the emissions to sum.

    Returns
    -------
    pd.DataFrame
        One row per sector in :data:`~methane.config.SECTORS` order, with
        columns ``sector``, ``total_emissions``, ``share`` (fraction of the
        grand total) and ``share_pct`` (whole percent, for labels only).
        Sectors absent from the input total 0.0.
    """
    totals = (
        world.groupby("sector")[value_col]
        .sum()
        .reindex(pd.Index(SECTORS, name="sector"), fill_value=0.0)
        .astype("float64")
        .rename("total_emissions")
        .reset_index()
    )
    grand_total = totals["total_emissions"].sum()
    if grand_total:
        totals["share"] = totals["total_emissions"] / grand_total
    else:
        totals["share"] = float("nan")
    totals["share_pct"] = (totals["share"] * 100).round().astype("Int64")
    return totals


def world_total(world_totals: pd.DataFrame) -> float:
    """Grand total of a :func:`compute_world_totals` table."""
    return float(world_totals["total_emissions"].sum())


def sector_shares(world_totals: pd.DataFrame) -> Dict[str, float]:
    """Map sector -> raw share of the world total."""
    return dict(zip(world_totals["sector"], world_totals["share"]))


def remap_countries(
    df: pd.DataFrame, mapping: Dict[str, str] = COUNTRY_REMAP
) -> pd.DataFrame:
    """Return a copy of ``df`` with country names replaced through ``mapping``."""
    out = df.copy()
    out["country"] = out["country"].replace(mapping)
    return out


def aggregate_countries(
    df: pd.DataFrame,
    value_col: str = "emissions",
    mapping: Dict[str, str] = COUNTRY_REMAP,
) -> pd.DataFrame:
    """Collapse country rows to one row per (country, sector).

    Names are remapped *before* grouping, so EU members fold into a single
    ``EU*`` row per sector.  Rows without a country are dropped by the
    grouping.  The output keeps first-occurrence order, which callers should
    not rely on.

    Running this on its own output (``value_col="total_emissions"``)
    returns the same table.
    """
    remapped = remap_countries(df, mapping)
    grouped = (
        remapped.groupby(["sector", "country"], as_index=False, sort=False)[value_col]
        .sum()
        .rename(columns={value_col: "total_emissions"})
    )
    grouped["total_emissions"] = grouped["total_emissions"].astype("float64")
    return grouped[["country", "sector", "total_emissions"]]


def aggregate_emissions(emissions: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Run the aggregation stage on loaded emission rows.

    Returns
    -------
    Tuple[pd.DataFrame, pd.DataFrame]
        ``(long, world_totals)``: the long (country, sector,
        total_emissions) table and the per-sector world totals.
    """
    world, countries = split_world_rows(emissions)
    if world.empty:
        # No world rows in the input: fall back to the country sum
        logger.warning("No world rows in emissions input; deriving totals from countries")
        world = countries
    world_totals = compute_world_totals(world)
    long = aggregate_countries(countries)

    logger.info(
        "Aggregated %d country rows into %d (country, sector) rows; world total %.1f Mt",
        len(countries),
        len(long),
        world_total(world_totals),
    )
    return long, world_totals
