"""Core pipeline logic: combine methane emissions with population.

This module orchestrates the loading, aggregation and enrichment of two
datasets:

* The methane emissions dataset, which provides 2021 emissions (million
  tons CO2-equivalent) by country and sector, plus world rows without a
  country.
* The World Bank population dataset, with one population column per year.

The primary entry point is :func:`run_pipeline`, which produces the
aggregated long table, the enriched per-country table, the focus-country
share statistics and the four chart tables consumed by the renderer.
"""

from __future__ import annotations

import logging
from typing import Dict

from .aggregate import aggregate_emissions, world_total
from .config import (
    DEFAULT_EMISSIONS_SOURCE,
    DEFAULT_POPULATION_SOURCE,
    POPULATION_SKIPROWS,
)
from .enrich import enrich_countries, focus_shares
from .loaders import Source, load_emissions, load_population
from .tables import (
    column_chart_table,
    map_highlight_table,
    scatter_table,
    treemap_table,
)

# Module-level logger
logger = logging.getLogger(__name__)


def run_pipeline(
    emissions_source: Source = DEFAULT_EMISSIONS_SOURCE,
    population_source: Source = DEFAULT_POPULATION_SOURCE,
    *,
    population_skiprows: int = POPULATION_SKIPROWS,
) -> Dict[str, object]:
    """Run the full data pipeline and return every intermediate table.

    Parameters
    ----------
    emissions_source : str, Path or pd.DataFrame, optional
        Emissions CSV (or raw DataFrame).
    population_source : str, Path or pd.DataFrame, optional
        Population CSV (or raw DataFrame).
    population_skiprows : int, optional
        Preamble lines above the population header row.

    Returns
    -------
    Dict[str, object]
        ``emissions`` and ``population`` (loaded inputs), ``long``
        (country, sector totals), ``world`` (sector world totals), ``wide``
        (enriched per-country table), ``focus`` (share statistics dict)
        and the chart tables ``treemap``, ``scatter``, ``columns`` and
        ``map``.
    """
    # 1. Load raw inputs
    emissions = load_emissions(emissions_source)
    population = load_population(population_source, skiprows=population_skiprows)

    # 2. Aggregate to (country, sector) and world totals
    long, world = aggregate_emissions(emissions)

    # 3. Enrich with population and compute focus statistics
    wide = enrich_countries(long, population)
    focus = focus_shares(wide, world_total(world))
    logger.info(
        "Focus countries: %.0f%% of world emissions, %.0f%% of world population",
        focus["emissions_share"] * 100,
        focus["population_share"] * 100,
    )

    # 4. Shape chart tables
    return {
        "emissions": emissions,
        "population": population,
        "long": long,
        "world": world,
        "wide": wide,
        "focus": focus,
        "treemap": treemap_table(long, world),
        "scatter": scatter_table(wide),
        "columns": column_chart_table(long),
        "map": map_highlight_table(),
    }
