"""
Serialization helpers for DemoReport.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Name/result pairs are stored as {"input", "output"} mappings so the
exported files read naturally.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

import yaml

from monoutils.demo import DemoReport


def _pairs_to_list(pairs: List[Tuple[str, str]]) -> List[Dict[str, str]]:
    return [{"input": source, "output": result} for source, result in pairs]


def _pairs_from_list(items: List[Dict[str, str]]) -> List[Tuple[str, str]]:
    return [(item["input"], item["output"]) for item in items]


def report_to_dict(r: DemoReport) -> Dict[str, Any]:
    return {
        "sum": {"args": list(r.sum_args), "result": r.sum_result},
        "capitalized": _pairs_to_list(r.capitalized),
        "kebab_cased": _pairs_to_list(r.kebab_cased),
        "chunked": {"size": r.chunk_size, "chunks": [list(c) for c in r.chunks]},
        "unique": {"original": list(r.original_numbers), "result": list(r.unique_numbers)},
    }


def report_from_dict(d: Dict[str, Any]) -> DemoReport:
    sum_part = d.get("sum", {})
    chunk_part = d.get("chunked", {})
    unique_part = d.get("unique", {})
    return DemoReport(
        sum_args=list(sum_part.get("args", [])),
        sum_result=sum_part.get("result", 0),
        capitalized=_pairs_from_list(d.get("capitalized", [])),
        kebab_cased=_pairs_from_list(d.get("kebab_cased", [])),
        chunk_size=chunk_part.get("size", 0),
        chunks=[list(c) for c in chunk_part.get("chunks", [])],
        original_numbers=list(unique_part.get("original", [])),
        unique_numbers=list(unique_part.get("result", [])),
    )


def report_to_json(r: DemoReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_from_json(s: str) -> DemoReport:
    d = json.loads(s)
    return report_from_dict(d)


def report_to_yaml(r: DemoReport) -> str:
    return yaml.safe_dump(report_to_dict(r), sort_keys=False)


def report_from_yaml(s: str) -> DemoReport:
    d = yaml.safe_load(s)
    return report_from_dict(d)
