import pandas as pd
import pytest
from pandas.testing import assert_frame_equal

from methane import pipeline
from methane.exceptions import MissingColumnError, UnmatchedCountryWarning

TABLE_KEYS = ["emissions", "population", "long", "world", "wide", "treemap", "scatter", "columns", "map"]


@pytest.fixture
def payload(emissions_csv, population_csv):
    with pytest.warns(UnmatchedCountryWarning):
        return pipeline.run_pipeline(emissions_csv, population_csv)


def test_run_pipeline_payload(payload):
    for key in TABLE_KEYS:
        assert isinstance(payload[key], pd.DataFrame), key
    assert set(payload["focus"]) == {
        "focus_population",
        "world_population",
        "population_share",
        "focus_emissions",
        "world_emissions",
        "emissions_share",
    }


def test_run_pipeline_values(payload):
    wide = payload["wide"].set_index("country")
    focus = payload["focus"]

    assert focus["world_emissions"] == pytest.approx(1000.0)
    # China 100 + U.S. 50 + EU* 17
    assert focus["focus_emissions"] == pytest.approx(167.0)
    assert focus["emissions_share"] == pytest.approx(0.167)
    assert wide.loc["Congo", "population"] == 5_800_000
    assert pd.isna(wide.loc["Atlantis", "emissions_per_capita"])
    assert set(payload["columns"]["country"].astype(str)) == {"China", "U.S.", "EU*"}
    assert "Other" in set(payload["treemap"]["country"])
    assert "Other" not in set(payload["wide"]["country"])


def test_run_pipeline_is_idempotent(payload, emissions_csv, population_csv):
    with pytest.warns(UnmatchedCountryWarning):
        again = pipeline.run_pipeline(emissions_csv, population_csv)

    for key in TABLE_KEYS:
        assert_frame_equal(payload[key], again[key])
    assert payload["focus"] == again["focus"]


def test_run_pipeline_accepts_frames(raw_emissions, raw_population):
    with pytest.warns(UnmatchedCountryWarning):
        result = pipeline.run_pipeline(raw_emissions, raw_population)

    assert len(result["wide"]) == 5


def test_run_pipeline_missing_column_aborts(tmp_path, population_csv):
    path = tmp_path / "bad.csv"
    pd.DataFrame({"country": ["France"], "emissions": [1.0]}).to_csv(path, index=False)

    with pytest.raises(MissingColumnError):
        pipeline.run_pipeline(path, population_csv)
