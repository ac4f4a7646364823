"""Write pipeline tables to disk.

The chart tables are handed to the external renderer as CSV files.  Files
are written atomically so an interrupted run never leaves a half-written
table behind.
"""

import os
import tempfile
import logging
from pathlib import Path
from typing import Dict, Mapping

import pandas as pd

logger = logging.getLogger(__name__)

# Payload key -> output file name
TABLE_FILES: Dict[str, str] = {
    "long": "emissions_by_country_sector.csv",
    "world": "world_sector_totals.csv",
    "wide": "emissions_by_country.csv",
    "treemap": "treemap.csv",
    "scatter": "scatter.csv",
    "columns": "column_chart.csv",
    "map": "map_highlight.csv",
}
FOCUS_FILE: str = "focus_summary.csv"


def resolve_output_dir() -> Path:
    """Select a writable directory for the output tables.

    The lookup order is:

    1. The ``METHANE_OUTPUT_DIR`` environment variable, if set.
    2. A ``data/output`` folder at the repository root.
    3. A temporary directory in ``/tmp``.

    Each candidate path is tested for writability by attempting to
    create and delete a sentinel file.  The first path that succeeds
    is returned.
    """
    candidates: list[Path] = []
    env = os.getenv("METHANE_OUTPUT_DIR")
    if env:
        candidates.append(Path(env).expanduser().resolve())

    # Repo root /data/output (two levels up from this file)
    candidates.append(Path(__file__).resolve().parent.parent / "data" / "output")
    candidates.append(Path(tempfile.gettempdir()) / "methane_infographic")

    for path in candidates:
        try:
            path.mkdir(parents=True, exist_ok=True)
            test_file = path / ".write_test"
            test_file.write_text("ok", encoding="utf-8")
            test_file.unlink()
            return path
        except OSError as exc:
            logger.debug("Output directory %s not writable: %s", path, exc)
            continue

    raise OSError(f"No writable output directory among {candidates}")


def atomic_to_csv(df: pd.DataFrame, path: Path) -> None:
    """Write a DataFrame to CSV atomically.

    The CSV is first written to a temporary file in the same directory
    and then renamed to the final location.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    df.to_csv(tmp_path, index=False)
    tmp_path.replace(path)


def write_tables(payload: Mapping[str, object], out_dir: Path) -> Dict[str, Path]:
    """Write the payload tables and the focus summary as CSV files.

    Parameters
    ----------
    payload : Mapping[str, object]
        Output of :func:`methane.pipeline.run_pipeline`.
    out_dir : Path
        Target directory; created if needed.

    Returns
    -------
    Dict[str, Path]
        Payload key (plus ``"focus"``) -> written file.
    """
    out_dir = Path(out_dir)
    written: Dict[str, Path] = {}
    for key, filename in TABLE_FILES.items():
        path = out_dir / filename
        atomic_to_csv(payload[key], path)
        written[key] = path

    focus_path = out_dir / FOCUS_FILE
    atomic_to_csv(pd.DataFrame([payload["focus"]]), focus_path)
    written["focus"] = focus_path

    logger.info("Wrote %d tables to %s", len(written), out_dir)
    return written
