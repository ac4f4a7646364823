import pandas as pd
import pytest

from methane import export, main
from methane.exceptions import UnmatchedCountryWarning
from methane.pipeline import run_pipeline


def test_atomic_to_csv(tmp_path):
    path = tmp_path / "nested" / "table.csv"
    export.atomic_to_csv(pd.DataFrame({"a": [1, 2]}), path)

    assert pd.read_csv(path)["a"].tolist() == [1, 2]
    assert not path.with_suffix(".csv.tmp").exists()


def test_resolve_output_dir_from_env(tmp_path, monkeypatch):
    target = tmp_path / "out"
    monkeypatch.setenv("METHANE_OUTPUT_DIR", str(target))

    assert export.resolve_output_dir() == target.resolve()
    assert target.is_dir()


def test_write_tables(tmp_path, raw_emissions, raw_population):
    with pytest.warns(UnmatchedCountryWarning):
        payload = run_pipeline(raw_emissions, raw_population)

    written = export.write_tables(payload, tmp_path)

    assert set(written) == set(export.TABLE_FILES) | {"focus"}
    for path in written.values():
        assert path.exists()
    summary = pd.read_csv(written["focus"])
    assert summary.loc[0, "emissions_share"] == pytest.approx(0.167)
    treemap = pd.read_csv(written["treemap"], keep_default_na=False)
    assert list(treemap.columns) == ["country", "sector", "total_emissions", "sector_label", "label"]


def test_main_writes_tables_and_figures(tmp_path, emissions_csv, population_csv, capsys):
    out_dir = tmp_path / "out"
    with pytest.warns(UnmatchedCountryWarning):
        main.main(
            [
                "--emissions",
                str(emissions_csv),
                "--population",
                str(population_csv),
                "--output-dir",
                str(out_dir),
                "--figures",
            ]
        )

    assert (out_dir / "scatter.csv").exists()
    assert (out_dir / "treemap.html").exists()
    assert (out_dir / "map.html").exists()
    assert "METHANE PIPELINE COMPLETE" in capsys.readouterr().out
