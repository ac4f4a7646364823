"""Loaders for the emissions and population inputs.

Both loaders read a CSV (or accept an already-read DataFrame), normalise the
column names to lower-case/underscore form, rename the source-specific
columns to their canonical names and keep only the columns the pipeline
needs.  A missing required column raises
:class:`~methane.exceptions.MissingColumnError`.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from .config import (
    DEFAULT_EMISSIONS_SOURCE,
    DEFAULT_POPULATION_SOURCE,
    EMISSIONS_COLUMN_ALIASES,
    EMISSIONS_COLUMNS,
    POPULATION_COLUMN_ALIASES,
    POPULATION_COLUMNS,
    POPULATION_SKIPROWS,
    SECTORS,
)
from .exceptions import MissingColumnError

logger = logging.getLogger(__name__)

Source = Union[str, Path, pd.DataFrame]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def normalize_column_name(name: object) -> str:
    """Lower-case a column name and collapse non-alphanumerics to ``_``.

    >>> normalize_column_name("Country Name")
    'country_name'
    >>> normalize_column_name("2021 [YR2021]")
    '2021_yr2021'
    """
    text = str(name).strip().lower()
    text = re.sub(r"[^0-9a-z]+", "_", text)
    return text.strip("_")


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``df`` with normalised column names."""
    return df.rename(columns=normalize_column_name)


def ensure_columns(df: pd.DataFrame, required: List[str]) -> None:
    """Raise an error if the DataFrame lacks any of the required columns."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise MissingColumnError(missing, available=df.columns)


def _canonical_frame(
    raw: pd.DataFrame, aliases: Dict[str, str], required: List[str]
) -> pd.DataFrame:
    df = normalize_columns(raw)
    # First alias wins when a file carries two spellings of the same column
    renames: Dict[str, str] = {}
    for col in df.columns:
        target = aliases.get(col)
        if target is not None and target not in renames.values():
            renames[col] = target
    df = df[list(renames)].rename(columns=renames)
    ensure_columns(df, required)
    return df[required].copy()


def _read(source: Source, **kwargs) -> pd.DataFrame:
    if isinstance(source, pd.DataFrame):
        return source.copy()
    return pd.read_csv(source, **kwargs)


def _clean_names(series: pd.Series) -> pd.Series:
    cleaned = series.where(series.isna(), series.astype(str).str.strip())
    return cleaned.mask(cleaned == "")


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------


def load_emissions(source: Source = DEFAULT_EMISSIONS_SOURCE) -> pd.DataFrame:
    """Load the emissions-by-country-and-sector table.

    Parameters
    ----------
    source : str, Path or pd.DataFrame
        Path to the emissions CSV, or a raw DataFrame as read from it.

    Returns
    -------
    pd.DataFrame
        Columns ``country`` (``<NA>`` marks a world row), ``sector`` and
        ``emissions`` (float, million tons CO2-equivalent).
    """
    df = _canonical_frame(_read(source), EMISSIONS_COLUMN_ALIASES, EMISSIONS_COLUMNS)
    df["country"] = _clean_names(df["country"])
    df["sector"] = _clean_names(df["sector"])
    df["emissions"] = pd.to_numeric(df["emissions"], errors="coerce").astype("float64")

    unknown = sorted(set(df["sector"].dropna()) - set(SECTORS))
    if unknown:
        logger.warning("Unrecognised sector labels in emissions input: %s", unknown)
    no_sector = int(df["sector"].isna().sum())
    if no_sector:
        logger.warning("%d emission rows have no sector and are left out of aggregation", no_sector)

    logger.info(
        "Loaded %d emission rows (%d world rows)", len(df), int(df["country"].isna().sum())
    )
    return df.reset_index(drop=True)


def load_population(
    source: Source = DEFAULT_POPULATION_SOURCE,
    *,
    skiprows: int = POPULATION_SKIPROWS,
) -> pd.DataFrame:
    """Load the population-by-country table for the reference year.

    Parameters
    ----------
    source : str, Path or pd.DataFrame
        Path to the population CSV, or a raw DataFrame (in which case
        ``skiprows`` is ignored).
    skiprows : int, optional
        Preamble lines above the header row; the World Bank bulk download
        has four.

    Returns
    -------
    pd.DataFrame
        Columns ``country`` and ``population`` (nullable ``Int64``).
    """
    raw = _read(source, skiprows=skiprows)
    df = _canonical_frame(raw, POPULATION_COLUMN_ALIASES, POPULATION_COLUMNS)
    df["country"] = _clean_names(df["country"])
    df = df.dropna(subset=["country"])
    df["population"] = pd.to_numeric(df["population"], errors="coerce").round().astype("Int64")

    dupes = df["country"].duplicated()
    if dupes.any():
        logger.warning(
            "Dropping %d duplicate population rows: %s",
            int(dupes.sum()),
            sorted(df.loc[dupes, "country"].unique()),
        )
        df = df.loc[~dupes]

    logger.info("Loaded %d population rows", len(df))
    return df.reset_index(drop=True)
