from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import (
    DEFAULT_EMISSIONS_SOURCE,
    DEFAULT_POPULATION_SOURCE,
    POPULATION_SKIPROWS,
)
from .export import resolve_output_dir, write_tables
from .pipeline import run_pipeline
from .plotting import create_figures


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Aggregate 2021 methane emissions by country and sector, join "
            "population and write the infographic chart tables."
        )
    )
    parser.add_argument(
        "--emissions",
        default=DEFAULT_EMISSIONS_SOURCE,
        help=f"Path to the emissions CSV (default: {DEFAULT_EMISSIONS_SOURCE}).",
    )
    parser.add_argument(
        "--population",
        default=DEFAULT_POPULATION_SOURCE,
        help=f"Path to the World Bank population CSV (default: {DEFAULT_POPULATION_SOURCE}).",
    )
    parser.add_argument(
        "--population-skiprows",
        type=int,
        default=POPULATION_SKIPROWS,
        help=f"Preamble lines above the population header (default: {POPULATION_SKIPROWS}).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the output tables (default: $METHANE_OUTPUT_DIR or data/output).",
    )
    parser.add_argument(
        "--figures",
        action="store_true",
        help="Also write HTML previews of the four charts.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    payload = run_pipeline(
        args.emissions,
        args.population,
        population_skiprows=args.population_skiprows,
    )
    out_dir = args.output_dir if args.output_dir is not None else resolve_output_dir()
    written = write_tables(payload, out_dir)

    if args.figures:
        for name, fig in create_figures(payload).items():
            path = out_dir / f"{name}.html"
            fig.write_html(path)
            written[f"{name}_figure"] = path

    focus = payload["focus"]
    print("\n--- METHANE PIPELINE COMPLETE ---")
    print(
        f"Countries: {len(payload['wide'])} | (country, sector) rows: {len(payload['long'])} | "
        f"World total: {focus['world_emissions']:.1f} Mt CO2-eq"
    )
    print(
        f"Focus share of world emissions: {focus['emissions_share']:.1%} | "
        f"of world population: {focus['population_share']:.1%}"
    )
    print(f"\nSaved outputs to {out_dir}/:")
    for path in written.values():
        print(f"  - {path.name}")
    print("\nWorld sector totals:")
    print(payload["world"])


if __name__ == "__main__":
    main()
