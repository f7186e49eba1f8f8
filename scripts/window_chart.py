import os
import json
import argparse

from chartwindow.charts import plot_window, to_chart_payload
from chartwindow.data.datasets import load_csv_series
from chartwindow.data.windowing import WindowConfig


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--csv", required=True, type=str)
    parser.add_argument("--name", default=None, type=str, help="Output file prefix (default: csv stem)")
    parser.add_argument("--label_col", default="label", type=str)
    parser.add_argument("--value_col", default="value", type=str)
    parser.add_argument("--period", default="1m", type=str, help="1w, 1m, 3m, 6m, 1y, all or '<n> <unit>'")
    parser.add_argument("--length", default=None, type=int, help="Window length, overrides --period")
    parser.add_argument("--results_dir", default="results", type=str)
    parser.add_argument("--plot", action="store_true")
    args = parser.parse_args()

    name = args.name or os.path.splitext(os.path.basename(args.csv))[0]

    # 1) Load series
    sd = load_csv_series(args.csv, name=name, label_col=args.label_col, value_col=args.value_col)
    series = sd.labeled()
    print(f"Loaded {name}: {len(series.labels)} points")

    # 2) Window
    if args.length is not None:
        cfg = WindowConfig(length=args.length)
    else:
        cfg = WindowConfig.from_period(args.period, available=len(series.labels))
    result = series.window(cfg.length)
    print(f"Window length={cfg.length} -> {len(result.labels)} points")

    # 3) Save payload
    table_dir = os.path.join(args.results_dir, "tables")
    os.makedirs(table_dir, exist_ok=True)
    json_out = os.path.join(table_dir, f"{name}_window.json")
    with open(json_out, "w", encoding="utf-8") as f:
        json.dump(to_chart_payload(result), f, indent=2)
    print(f"Saved table: {json_out}")

    # 4) Optional plot
    if args.plot:
        fig_out = os.path.join(args.results_dir, "figures", f"{name}_window.png")
        plot_window(result, fig_out, title=f"{name} (last {cfg.length})")
        print(f"Saved plot: {fig_out}")


if __name__ == "__main__":
    main()
