from __future__ import annotations
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from chartwindow.data.windowing import WindowResult


def to_plain(x: Any) -> Any:
    """numpy scalars -> python, NaN/NA -> None."""
    if isinstance(x, np.generic):
        x = x.item()
    if x is None or (not isinstance(x, str) and pd.isna(x)):
        return None
    return x


def to_chart_payload(result: WindowResult) -> dict[str, list]:
    """Chart.js style {labels, data}, safe for json.dumps."""
    return {
        "labels": [to_plain(x) for x in result.labels],
        "data": [to_plain(x) for x in result.values],
    }


def plot_window(result: WindowResult, outpath: str | Path, title: str | None = None) -> Path:
    payload = to_chart_payload(result)
    labels, data = payload["labels"], payload["data"]

    if len(labels) != len(data):
        raise ValueError(f"Cannot plot mismatched window: labels={len(labels)} values={len(data)}")

    outpath = Path(outpath)
    outpath.parent.mkdir(parents=True, exist_ok=True)

    # nulls and non-numeric text become gaps, same as the loader
    y = pd.to_numeric(pd.Series(data, dtype=object), errors="coerce").astype(float).tolist()
    x = ["" if lab is None else lab for lab in labels]

    fig = plt.figure(figsize=(10, 4))
    try:
        plt.plot(range(len(y)), y, marker="o")
        plt.xticks(range(len(x)), x, rotation=30)
        if title:
            plt.title(title)
        plt.savefig(outpath, dpi=150, bbox_inches="tight")
    finally:
        plt.close(fig)
    return outpath
