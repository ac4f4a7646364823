import pandas as pd
import pytest


@pytest.fixture
def raw_emissions():
    # IEA Methane Tracker layout: world rows carry a region but no country
    return pd.DataFrame(
        {
            "region": ["World", "World", "World", "World", "Europe", "Europe", "Europe",
                       "North America", "North America", "Africa", "Africa", "Asia Pacific",
                       "Asia Pacific", "Europe", "Other"],
            "country": [None, None, None, None, "France", "Germany", "France",
                        "United States", "United States", "Congo", "Atlantis", "China",
                        "China", "Other countries in Europe", "Other"],
            "emissions": [400.0, 300.0, 200.0, 100.0, 10.0, 5.0, 2.0,
                          30.0, 20.0, 4.0, 5.0, 60.0, 40.0, 3.0, 1.0],
            "type": ["Energy", "Agriculture", "Waste", "Other", "Agriculture", "Agriculture", "Energy",
                     "Energy", "Energy", "Waste", "Energy", "Energy",
                     "Agriculture", "Waste", "Other"],
            "segment": ["Total"] * 15,
            "baseYear": ["2021"] * 15,
        }
    )


@pytest.fixture
def raw_population():
    # World Bank WDI layout (after the four-line preamble)
    return pd.DataFrame(
        {
            "Country Name": ["France", "Congo, Rep.", "United States", "China",
                             "European Union", "Russian Federation", "World"],
            "Country Code": ["FRA", "COG", "USA", "CHN", "EUU", "RUS", "WLD"],
            "Indicator Name": ["Population, total"] * 7,
            "2020": [67_000_000, 5_500_000, 331_000_000, 1_411_000_000,
                     447_000_000, 144_000_000, 7_820_000_000],
            "2021": [67_700_000, 5_800_000, 332_000_000, 1_412_000_000,
                     447_300_000, 143_400_000, 7_888_000_000],
        }
    )


@pytest.fixture
def population_csv(tmp_path, raw_population):
    path = tmp_path / "population.csv"
    preamble = (
        '"Data Source","World Development Indicators",\n'
        "\n"
        '"Last Updated Date","2023-07-25",\n'
        "\n"
    )
    path.write_text(preamble + raw_population.to_csv(index=False), encoding="utf-8")
    return path


@pytest.fixture
def emissions_csv(tmp_path, raw_emissions):
    path = tmp_path / "emissions.csv"
    raw_emissions.to_csv(path, index=False)
    return path
