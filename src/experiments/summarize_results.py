from __future__ import annotations

import csv
import statistics
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List


@dataclass
class MetricStats:
    count: int
    mean: float
    std: float | None
    min: float
    max: float


def _safe_float(x: str) -> float:
    """Boş string veya None gelirse 0.0 döner, aksi halde float'a çevirir."""
    if x is None:
        return 0.0
    x = x.strip()
    if not x:
        return 0.0
    return float(x)


def _stats(values: List[float]) -> MetricStats:
    return MetricStats(
        count=len(values),
        mean=statistics.mean(values),
        std=statistics.stdev(values) if len(values) > 1 else None,
        min=min(values),
        max=max(values),
    )


def summarize_results(
    input_csv: str | Path = "experiment_results.csv",
    output_csv: str | Path | None = "experiment_stats.csv",
) -> Dict[str, Dict[str, MetricStats]]:
    """experiment_results.csv dosyasından operasyon başına istatistikleri hesaplar.

    Dönüş: {operation: {"runtime_ms": MetricStats, "value": MetricStats}}
    """
    input_csv = Path(input_csv)
    if not input_csv.exists():
        raise FileNotFoundError(f"Input file not found: {input_csv}")

    groups: Dict[str, Dict[str, List[float]]] = defaultdict(lambda: defaultdict(list))
    with input_csv.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            metrics = groups[row["operation"]]
            metrics["runtime_ms"].append(_safe_float(row["runtime_ms"]))
            metrics["value"].append(_safe_float(row["value"]))

    summary = {
        op: {name: _stats(values) for name, values in metrics.items()}
        for op, metrics in groups.items()
    }

    if output_csv is not None:
        with Path(output_csv).open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["operation", "metric", "count", "mean", "std", "min", "max"])
            for op, metrics in summary.items():
                for name, s in metrics.items():
                    writer.writerow([op, name, s.count, s.mean, "" if s.std is None else s.std, s.min, s.max])

    return summary


if __name__ == "__main__":
    for op, metrics in summarize_results().items():
        rt = metrics["runtime_ms"]
        print(f"{op:8s} runs={rt.count:3d} mean={rt.mean:.3f}ms max={rt.max:.3f}ms")
