import logging

import pandas as pd
import pytest

from methane import loaders
from methane.exceptions import MissingColumnError


def test_normalize_column_name():
    assert loaders.normalize_column_name("Country Name") == "country_name"
    assert loaders.normalize_column_name("  Emissions ") == "emissions"
    assert loaders.normalize_column_name("2021 [YR2021]") == "2021_yr2021"
    assert loaders.normalize_column_name(2021) == "2021"


def test_load_emissions_keeps_canonical_columns(raw_emissions):
    df = loaders.load_emissions(raw_emissions)

    assert list(df.columns) == ["country", "sector", "emissions"]
    assert df["country"].isna().sum() == 4
    assert df["emissions"].dtype == "float64"
    assert set(df["sector"]) == {"Energy", "Agriculture", "Waste", "Other"}


def test_load_emissions_blank_country_is_world_row():
    raw = pd.DataFrame(
        {"Country": ["  ", " France "], "Emissions": [1.0, 2.0], "Type": ["Energy", "Energy"]}
    )
    df = loaders.load_emissions(raw)

    assert pd.isna(df.loc[0, "country"])
    assert df.loc[1, "country"] == "France"


def test_load_emissions_passes_negative_values_through():
    raw = pd.DataFrame({"country": ["A", "B"], "emissions": [-1.5, 0], "type": ["Waste", "Waste"]})
    df = loaders.load_emissions(raw)

    assert df["emissions"].tolist() == [-1.5, 0.0]


def test_load_emissions_missing_column():
    raw = pd.DataFrame({"country": ["France"], "emissions": [1.0]})

    with pytest.raises(MissingColumnError) as excinfo:
        loaders.load_emissions(raw)

    assert excinfo.value.missing == ["sector"]
    assert isinstance(excinfo.value, KeyError)
    assert "sector" in str(excinfo.value)


def test_load_population_renames_year_column(raw_population):
    df = loaders.load_population(raw_population)

    assert list(df.columns) == ["country", "population"]
    assert df["population"].dtype == "Int64"
    row = df[df["country"] == "Congo, Rep."]
    assert row["population"].iloc[0] == 5_800_000


def test_load_population_from_world_bank_csv(population_csv):
    df = loaders.load_population(population_csv)

    assert len(df) == 7
    assert df.set_index("country").loc["France", "population"] == 67_700_000


def test_load_population_databank_header_and_missing_values():
    raw = pd.DataFrame(
        {"Country Name": ["Eritrea", "Kenya"], "2021 [YR2021]": ["..", "53005614"]}
    )
    df = loaders.load_population(raw)

    assert pd.isna(df.loc[0, "population"])
    assert df.loc[1, "population"] == 53_005_614


def test_load_population_drops_duplicate_countries():
    raw = pd.DataFrame({"Country Name": ["Chad", "Chad"], "2021": [1, 2]})
    df = loaders.load_population(raw)

    assert df["population"].tolist() == [1]


def test_load_population_missing_year_column():
    raw = pd.DataFrame({"Country Name": ["Chad"], "2020": [1]})

    with pytest.raises(MissingColumnError):
        loaders.load_population(raw)


def test_load_emissions_warns_about_rows_without_sector(caplog):
    raw = pd.DataFrame(
        {"country": ["Chile", "Chile"], "emissions": [1.0, 2.0], "type": ["Energy", " "]}
    )
    with caplog.at_level(logging.WARNING, logger="methane.loaders"):
        df = loaders.load_emissions(raw)

    assert df["sector"].isna().sum() == 1
    assert "1 emission rows have no sector" in caplog.text
