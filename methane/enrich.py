"""Per-country wide metrics: sector pivot, population join and per-capita.

The long (country, sector) table is pivoted to one row per country, joined
with World Bank population through :data:`~methane.config.COUNTRY_ALIASES`
and given per-capita emissions.  :func:`focus_shares` summarises the focus
countries against the world.
"""

from __future__ import annotations

import logging
import warnings
from typing import Dict, List

import numpy as np
import pandas as pd

from .config import (
    BUCKET_COUNTRIES,
    COUNTRY_ALIASES,
    FOCUS_COUNTRIES,
    SECTOR_COLUMNS,
    SECTORS,
    WORLD_POPULATION,
)
from .exceptions import DuplicateAggregateWarning, UnmatchedCountryWarning

logger = logging.getLogger(__name__)

WIDE_SECTOR_COLUMNS: List[str] = [SECTOR_COLUMNS[sector] for sector in SECTORS]


def pivot_sectors(
    long: pd.DataFrame, exclude: List[str] = BUCKET_COUNTRIES
) -> pd.DataFrame:
    """Pivot the long emissions table to one row per country.

    Parameters
    ----------
    long : pd.DataFrame
        Columns ``country``, ``sector`` and ``total_emissions``.
    exclude : List[str], optional
        Residual bucket "countries" left out of the wide table.

    Returns
    -------
    pd.DataFrame
        Columns ``country``, ``energy``, ``agriculture``, ``waste``,
        ``other`` (missing sectors are 0.0) and ``total_emissions``.
    """
    df = long.loc[~long["country"].isin(exclude)]

    dupes = df.duplicated(["country", "sector"], keep=False)
    if dupes.any():
        keys = sorted(set(zip(df.loc[dupes, "country"], df.loc[dupes, "sector"])))
        message = f"Duplicate (country, sector) rows summed: {keys}"
        logger.warning(message)
        warnings.warn(message, DuplicateAggregateWarning, stacklevel=2)

    wide = (
        df.groupby(["country", "sector"])["total_emissions"]
        .sum()
        .unstack("sector")
        .reindex(columns=SECTORS)
        .fillna(0.0)
        .astype("float64")
    )
    wide.columns = WIDE_SECTOR_COLUMNS
    wide = wide.rename_axis("country").reset_index()
    wide["total_emissions"] = wide[WIDE_SECTOR_COLUMNS].sum(axis=1)
    return wide


def attach_population(
    wide: pd.DataFrame,
    population: pd.DataFrame,
    aliases: Dict[str, str] = COUNTRY_ALIASES,
) -> pd.DataFrame:
    """Left-join population onto the wide table via the alias table.

    Names are translated to the population dataset's spelling, joined on
    exact match and translated back, so the display names of ``wide`` are
    preserved.  Countries without a match keep a missing population and
    trigger a single :class:`UnmatchedCountryWarning`; matched countries
    whose population value is missing are only logged.
    """
    inverse = {target: name for name, target in aliases.items()}

    joined = wide.copy()
    joined["country"] = joined["country"].replace(aliases)
    joined = joined.merge(
        population[["country", "population"]],
        on="country",
        how="left",
        validate="many_to_one",
        indicator=True,
    )
    joined["country"] = joined["country"].replace(inverse)

    matched = joined.pop("_merge") == "both"
    no_value = sorted(joined.loc[matched & joined["population"].isna(), "country"])
    if no_value:
        logger.warning("Population missing for matched countries: %s", no_value)

    unmatched = sorted(joined.loc[~matched, "country"])
    if unmatched:
        message = f"No population match for {len(unmatched)} countries: {unmatched}"
        logger.warning(message)
        warnings.warn(message, UnmatchedCountryWarning, stacklevel=2)
    return joined


def add_per_capita(wide: pd.DataFrame) -> pd.DataFrame:
    """Add ``population_millions`` and ``emissions_per_capita``.

    Per-capita emissions are in tons CO2-eq per person: total emissions
    (million tons) times 10^6 over population.  Missing or zero population
    leaves ``emissions_per_capita`` missing; ``population_millions`` is only
    missing when the population is.
    """
    out = wide.copy()
    persons = pd.Series(
        out["population"].to_numpy(dtype="float64", na_value=np.nan), index=out.index
    )
    out["population_millions"] = persons / 1e6
    out["emissions_per_capita"] = out["total_emissions"] * 1e6 / persons.where(persons > 0)
    return out


def enrich_countries(long: pd.DataFrame, population: pd.DataFrame) -> pd.DataFrame:
    """Pivot, join population and derive per-capita emissions."""
    wide = pivot_sectors(long)
    wide = attach_population(wide, population)
    wide = add_per_capita(wide)
    logger.info(
        "Enriched %d countries (%d with population)",
        len(wide),
        int(wide["population"].notna().sum()),
    )
    return wide


def focus_shares(
    wide: pd.DataFrame,
    world_emissions: float,
    world_population: int = WORLD_POPULATION,
    focus: List[str] = FOCUS_COUNTRIES,
) -> Dict[str, float]:
    """Share of world population and emissions held by the focus countries.

    Parameters
    ----------
    wide : pd.DataFrame
        Enriched per-country table.
    world_emissions : float
        World total emissions (sum of the four sector totals).
    world_population : int, optional
        World population for the reference year.
    focus : List[str], optional
        Countries/blocs counted as focus.

    Returns
    -------
    Dict[str, float]
        Keys ``focus_population``, ``world_population``,
        ``population_share``, ``focus_emissions``, ``world_emissions`` and
        ``emissions_share``.  A zero denominator gives a NaN share.
    """
    rows = wide.loc[wide["country"].isin(focus)]
    missing = sorted(set(focus) - set(rows["country"]))
    if missing:
        logger.warning("Focus countries absent from the wide table: %s", missing)

    focus_population = float(rows["population"].sum(skipna=True))
    focus_emissions = float(rows["total_emissions"].sum())
    world_population = float(world_population)
    world_emissions = float(world_emissions)

    return {
        "focus_population": focus_population,
        "world_population": world_population,
        "population_share": (
            focus_population / world_population if world_population else float("nan")
        ),
        "focus_emissions": focus_emissions,
        "world_emissions": world_emissions,
        "emissions_share": (
            focus_emissions / world_emissions if world_emissions else float("nan")
        ),
    }
