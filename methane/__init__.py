"""methane package initializer.

This package contains the data pipeline behind the 2021 methane emissions
infographic.  Modules include data loading, aggregation, population
enrichment, chart table selection, export and plotting helpers.  See
individual module docstrings for details.
"""
