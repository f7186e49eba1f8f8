from __future__ import annotations

import json
import runpy
import sys
from pathlib import Path

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def run_window_chart(monkeypatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["window_chart.py", *args])
    runpy.run_path(str(SCRIPTS / "window_chart.py"), run_name="__main__")


def write_series(path: Path, n: int) -> None:
    rows = "".join(f"d{i},{i}\n" for i in range(n))
    path.write_text("label,value\n" + rows)


def test_length_overrides_period(tmp_path, monkeypatch) -> None:
    csv = tmp_path / "visits.csv"
    write_series(csv, 20)
    out_dir = tmp_path / "results"

    run_window_chart(monkeypatch, "--csv", str(csv), "--period", "1w", "--length", "3", "--results_dir", str(out_dir))

    payload = json.loads((out_dir / "tables" / "visits_window.json").read_text())
    assert payload == {"labels": ["d17", "d18", "d19"], "data": [17, 18, 19]}


def test_period_and_plot(tmp_path, monkeypatch) -> None:
    csv = tmp_path / "s.csv"
    write_series(csv, 10)
    out_dir = tmp_path / "results"

    run_window_chart(monkeypatch, "--csv", str(csv), "--name", "demo", "--period", "all",
                     "--results_dir", str(out_dir), "--plot")

    payload = json.loads((out_dir / "tables" / "demo_window.json").read_text())
    assert len(payload["labels"]) == 10
    assert (out_dir / "figures" / "demo_window.png").exists()
