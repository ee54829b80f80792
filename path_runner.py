"""
CLI to run shortest-path scenarios from a YAML file.

Reads scenarios/graphs.yml, builds one AdjacencyListGraph per scenario, runs
the lazy Dijkstra engine from each configured source, and writes one CSV row
per (scenario, source).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple
import csv
import time

from adjacency_list_graph import AdjacencyListGraph
from algorithms import ShortestPathEngine
from dijkstra_engine import LazyDijkstraEngine
from graph import Edge

RESULT_FIELDS = [
    "scenario",
    "source",
    "num_nodes",
    "reachable",
    "max_distance",
    "visit_order",
    "duration_sec",
]


@dataclass(frozen=True)
class ScenarioConfig:
    name: str
    num_nodes: int
    edges: Sequence[Edge]
    sources: Sequence[int] = (0,)


@dataclass(frozen=True)
class RunnerConfig:
    scenarios: Sequence[ScenarioConfig]


def _parse_scenario(raw: Dict[str, object], position: int) -> ScenarioConfig:
    if not isinstance(raw, dict):
        raise ValueError(f"Scenario #{position} must be a mapping, got {raw!r}.")
    name = str(raw.get("name", f"scenario_{position}"))
    for key in ("num_nodes", "edges"):
        if key not in raw:
            raise ValueError(f"Scenario '{name}' is missing required key '{key}'.")

    edges: List[Edge] = []
    for edge in raw["edges"] or []:
        if not isinstance(edge, (list, tuple)) or len(edge) != 3:
            raise ValueError(f"Scenario '{name}' has malformed edge {edge!r}; expected [source, target, weight].")
        src, dst, weight = edge
        if not (_is_node_id(src) and _is_node_id(dst)):
            raise ValueError(f"Scenario '{name}' has non-integer node id in edge {edge!r}.")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(f"Scenario '{name}' has non-numeric weight in edge {edge!r}.")
        edges.append((src, dst, weight))

    sources = raw.get("sources", [0])
    if not isinstance(sources, (list, tuple)) or not all(_is_node_id(s) for s in sources):
        raise ValueError(f"Scenario '{name}' has non-integer source in {sources!r}.")
    if not _is_node_id(raw["num_nodes"]):
        raise ValueError(f"Scenario '{name}' has non-integer num_nodes {raw['num_nodes']!r}.")
    return ScenarioConfig(
        name=name,
        num_nodes=raw["num_nodes"],
        edges=tuple(edges),
        sources=tuple(sources),
    )


def _is_node_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _load_raw_scenarios(path: Path) -> List[Dict[str, object]]:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    if "scenarios" not in data:
        raise ValueError(f"{path} has no 'scenarios' section.")
    return list(data["scenarios"] or [])


def load_config(path: Path) -> RunnerConfig:
    """Parse every scenario; the first malformed one raises ValueError."""
    return RunnerConfig(
        scenarios=[_parse_scenario(raw, i) for i, raw in enumerate(_load_raw_scenarios(path))],
    )


def run_scenarios(
    config_path: Path,
    results_csv: Path | None = None,
    engine: ShortestPathEngine | None = None,
) -> List[Dict[str, object]]:
    engine = engine or LazyDijkstraEngine()
    start = time.time()

    scenarios: List[ScenarioConfig] = []
    for position, raw in enumerate(_load_raw_scenarios(config_path)):
        try:
            scenarios.append(_parse_scenario(raw, position))
        except ValueError as exc:
            print(f"[run] skipped scenario #{position}: {exc}")

    tasks: List[Tuple[int, ScenarioConfig, int]] = [
        (i, scenario, source)
        for i, scenario in enumerate(scenarios)
        for source in scenario.sources
    ]
    print(f"[run] queued {len(tasks)} tasks across {len(scenarios)} scenarios")

    graphs: Dict[int, AdjacencyListGraph] = {}
    results: List[Dict[str, object]] = []
    for i, scenario, source in tasks:
        try:
            graph = graphs.get(i)
            if graph is None:
                graph = AdjacencyListGraph(scenario.num_nodes, scenario.edges)
                graphs[i] = graph
            res = _run_single(engine, graph, scenario.name, source)
        except (IndexError, ValueError) as exc:
            print(f"[run] failed scenario={scenario.name} source={source}: {exc}")
            continue
        results.append(res)
        print(
            f"[run] completed scenario={scenario.name} source={source} "
            f"reachable={res['reachable']} max_distance={res['max_distance']} "
            f"duration={res['duration_sec']:.4f}s"
        )

    if results_csv:
        write_results_csv(results, results_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} of {len(tasks)} runs in {elapsed:.2f}s")
    return results


def _run_single(
    engine: ShortestPathEngine, graph: AdjacencyListGraph, name: str, source: int
) -> Dict[str, object]:
    start_run = time.time()
    result = engine.shortest_path(graph, source)
    if result is None:
        max_distance = None
        visit_order: List[int] = []
    else:
        max_distance, visit_order = result
    return {
        "scenario": name,
        "source": source,
        "num_nodes": graph.num_nodes,
        "reachable": len(visit_order),
        "max_distance": max_distance,
        "visit_order": list(visit_order),
        "duration_sec": time.time() - start_run,
    }


def write_results_csv(results: Iterable[Dict[str, object]], path: Path) -> None:
    """
    Write per-run results to CSV for downstream analysis.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            max_distance = res.get("max_distance")
            writer.writerow(
                {
                    "scenario": res.get("scenario"),
                    "source": res.get("source"),
                    "num_nodes": res.get("num_nodes"),
                    "reachable": res.get("reachable"),
                    "max_distance": "" if max_distance is None else max_distance,
                    "visit_order": " ".join(str(n) for n in res.get("visit_order", [])),
                    "duration_sec": res.get("duration_sec", 0.0),
                }
            )


def main() -> None:
    config_path = Path(__file__).parent / "scenarios" / "graphs.yml"
    results_csv = Path(__file__).parent / "scenarios" / "results" / "runs.csv"

    results = run_scenarios(config_path, results_csv=results_csv)
    for res in results:
        print(res)
    print(f"Wrote runs to {results_csv}")


if __name__ == "__main__":
    main()
