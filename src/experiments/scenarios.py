from __future__ import annotations

from dataclasses import dataclass
from typing import List
import csv
from pathlib import Path


@dataclass
class Scenario:
    """Deney senaryosu tanımı.

    - num_nodes: düğüm sayısı
    - p: ek kenar olasılığı (G(n, p))
    - seed: tekrar üretilebilirlik için tohum
    """

    num_nodes: int
    p: float
    seed: int


# Bron-Kerbosch üstel olduğu için boyutlar küçük tutuldu
SCENARIOS: List[Scenario] = [
    Scenario(5, 0.3, 1),
    Scenario(8, 0.3, 2),
    Scenario(10, 0.2, 3),
    Scenario(10, 0.5, 4),
    Scenario(15, 0.2, 5),
    Scenario(15, 0.4, 6),
    Scenario(20, 0.15, 7),
    Scenario(20, 0.3, 8),
    Scenario(25, 0.2, 9),
    Scenario(30, 0.25, 10),
]


def load_scenarios_from_csv(csv_path: str | Path) -> List[Scenario]:
    """CSV'den senaryo listesi üretir.

    Beklenen kolonlar:
        num_nodes ; p ; seed
    """
    csv_path = Path(csv_path)
    scenarios: List[Scenario] = []

    with csv_path.open("r", newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f, delimiter=";")
        for row in reader:
            p_str = str(row.get("p", "")).strip()
            scenarios.append(
                Scenario(
                    num_nodes=int(row["num_nodes"]),
                    # Virgüllü ondalık da kabul edilir (0,25)
                    p=float(p_str.replace(",", ".")) if p_str else 0.0,
                    seed=int(row["seed"]),
                )
            )

    return scenarios
