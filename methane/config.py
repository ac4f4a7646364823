"""
Configuration constants for the methane emissions infographic pipeline.
"""

from typing import Dict, List, Tuple

# ======================================================
#  DATA SOURCES / CONSTANTS
# ======================================================
YEAR: int = 2021

# IEA Methane Tracker export and World Bank WDI population (SP.POP.TOTL)
DEFAULT_EMISSIONS_SOURCE: str = "data/methane_emissions_2021.csv"
DEFAULT_POPULATION_SOURCE: str = "data/population_wdi.csv"

# World Bank bulk downloads carry four metadata lines above the header
POPULATION_SKIPROWS: int = 4

# Normalised source column -> canonical column
EMISSIONS_COLUMN_ALIASES: Dict[str, str] = {
    "country": "country",
    "country_name": "country",
    "emissions": "emissions",
    "value": "emissions",
    "type": "sector",
    "sector": "sector",
}

POPULATION_COLUMN_ALIASES: Dict[str, str] = {
    "country": "country",
    "country_name": "country",
    f"{YEAR}": "population",
    f"{YEAR}_yr{YEAR}": "population",
    "population": "population",
}

EMISSIONS_COLUMNS: List[str] = ["country", "sector", "emissions"]
POPULATION_COLUMNS: List[str] = ["country", "population"]

# ======================================================
#  SECTORS
# ======================================================
SECTORS: List[str] = ["Energy", "Agriculture", "Waste", "Other"]

SECTOR_COLUMNS: Dict[str, str] = {
    "Energy": "energy",
    "Agriculture": "agriculture",
    "Waste": "waste",
    "Other": "other",
}

# ======================================================
#  COUNTRY NAMES
# ======================================================
EU_LABEL: str = "EU*"
US_LABEL: str = "U.S."

# Member states reported individually in the emissions table
EU_MEMBERS: List[str] = [
    "Austria",
    "Belgium",
    "Bulgaria",
    "Czech Republic",
    "Denmark",
    "France",
    "Germany",
    "Hungary",
    "Italy",
    "Netherlands",
    "Poland",
    "Romania",
    "Spain",
]

COUNTRY_REMAP: Dict[str, str] = {
    **{member: EU_LABEL for member in EU_MEMBERS},
    "United States": US_LABEL,
}

# Emissions display name -> World Bank name
COUNTRY_ALIASES: Dict[str, str] = {
    "Brunei": "Brunei Darussalam",
    "Congo": "Congo, Rep.",
    "Democratic Republic of Congo": "Congo, Dem. Rep.",
    "Egypt": "Egypt, Arab Rep.",
    EU_LABEL: "European Union",
    "Iran": "Iran, Islamic Rep.",
    "Korea": "Korea, Rep.",
    "Russia": "Russian Federation",
    "Syria": "Syrian Arab Republic",
    "Turkey": "Turkiye",
    US_LABEL: "United States",
    "Venezuela": "Venezuela, RB",
    "Vietnam": "Viet Nam",
    "Yemen": "Yemen, Rep.",
}

# Residual buckets: kept in the long table, never joined or ranked
BUCKET_COUNTRIES: List[str] = [
    "Other",
    "Other countries in Europe",
    "Other countries in Southeast Asia",
]

# ======================================================
#  CHART DEFAULTS
# ======================================================
FOCUS_COUNTRIES: List[str] = [
    "China",
    US_LABEL,
    "Russia",
    "Brazil",
    EU_LABEL,
    "Canada",
    "Australia",
]

# Treemap tiles too small to carry a readable label
BLANK_LABELS: List[str] = [
    "Azerbaijan",
    "Bahrain",
    "Brunei",
    "Gabon",
    "Kuwait",
    "Libya",
    "Oman",
    "Qatar",
    "Syria",
    "Trinidad and Tobago",
    "Turkmenistan",
    "Yemen",
]

EMPHASIS_FOCUS: float = 1.0
EMPHASIS_OTHER: float = 0.2

# Tons CO2-eq per person; points above are not drawn on the scatter
PER_CAPITA_CUTOFF: float = 350.0

WORLD_POPULATION: int = 7_888_408_686

# (boundary-dataset name, ISO3, shaded as)
MAP_HIGHLIGHT: List[Tuple[str, str, str]] = [
    ("China", "CHN", "China"),
    ("United States of America", "USA", US_LABEL),
    ("Russia", "RUS", "Russia"),
    ("Brazil", "BRA", "Brazil"),
    ("Canada", "CAN", "Canada"),
    ("Australia", "AUS", "Australia"),
    ("Austria", "AUT", EU_LABEL),
    ("Belgium", "BEL", EU_LABEL),
    ("Bulgaria", "BGR", EU_LABEL),
    ("Croatia", "HRV", EU_LABEL),
    ("Cyprus", "CYP", EU_LABEL),
    ("Czechia", "CZE", EU_LABEL),
    ("Denmark", "DNK", EU_LABEL),
    ("Estonia", "EST", EU_LABEL),
    ("Finland", "FIN", EU_LABEL),
    ("France", "FRA", EU_LABEL),
    ("Germany", "DEU", EU_LABEL),
    ("Greece", "GRC", EU_LABEL),
    ("Hungary", "HUN", EU_LABEL),
    ("Ireland", "IRL", EU_LABEL),
    ("Italy", "ITA", EU_LABEL),
    ("Latvia", "LVA", EU_LABEL),
    ("Lithuania", "LTU", EU_LABEL),
    ("Luxembourg", "LUX", EU_LABEL),
    ("Malta", "MLT", EU_LABEL),
    ("Netherlands", "NLD", EU_LABEL),
    ("Poland", "POL", EU_LABEL),
    ("Portugal", "PRT", EU_LABEL),
    ("Romania", "ROU", EU_LABEL),
    ("Slovakia", "SVK", EU_LABEL),
    ("Slovenia", "SVN", EU_LABEL),
    ("Spain", "ESP", EU_LABEL),
    ("Sweden", "SWE", EU_LABEL),
]

# ======================================================
#  PLOT DEFAULTS
# ======================================================
SECTOR_COLORS: Dict[str, str] = {
    "Energy": "#1f77b4",
    "Agriculture": "#2ca02c",
    "Waste": "#ff7f0e",
    "Other": "#9467bd",
}
