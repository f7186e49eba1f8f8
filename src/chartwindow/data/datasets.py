from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import pandas as pd

from chartwindow.data.windowing import LabeledSeries

@dataclass(frozen=True)
class SeriesData:
    name: str
    df: pd.DataFrame  # columns: label, value (file order, nulls kept)

    def labeled(self) -> LabeledSeries:
        df = self.df.astype(object).where(self.df.notna(), None)
        return LabeledSeries(labels=df["label"].tolist(), values=df["value"].tolist())

def load_csv_series(
    path: str | Path,
    name: str,
    label_col: str = "label",
    value_col: str = "value",
    numeric: bool = True,
) -> SeriesData:
    path = Path(path)
    # labels as text so "2020" does not become "2020.0" when the column has gaps
    df = pd.read_csv(path, dtype={label_col: str})

    missing = [c for c in (label_col, value_col) if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns {missing}, got {df.columns.tolist()}")

    df = df[[label_col, value_col]].rename(columns={label_col: "label", value_col: "value"})
    if numeric:
        df["value"] = pd.to_numeric(df["value"], errors="coerce")
    df = df.reset_index(drop=True)

    return SeriesData(name=name, df=df)
