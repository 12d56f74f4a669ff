"""
Web-app demo: run every shared utility over sample inputs.

run_demo() computes the results, format_report() renders them as the
console text the web app prints. The two are kept apart so the results
can be exported (see monoutils.serialization) without scraping text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Number
from typing import List, Optional, Tuple

from .arithmetic import sum as sum_values
from .config import DemoConfig
from .sequences import chunk, unique
from .strings import capitalize, kebab_case


logger = logging.getLogger(__name__)


@dataclass
class DemoReport:
    """Everything one demo run computed."""

    sum_args: List[Number] = field(default_factory=list)
    sum_result: Number = 0
    capitalized: List[Tuple[str, str]] = field(default_factory=list)
    kebab_cased: List[Tuple[str, str]] = field(default_factory=list)
    chunk_size: int = 0
    chunks: List[List[str]] = field(default_factory=list)
    original_numbers: List[Number] = field(default_factory=list)
    unique_numbers: List[Number] = field(default_factory=list)


def run_demo(config: Optional[DemoConfig] = None) -> DemoReport:
    """
    Apply sum, capitalize, kebab_case, chunk and unique to the config inputs.

    Raises:
        InvalidArgumentError: If the config holds inputs a utility rejects
                              (e.g. chunk_size <= 0)
    """
    if config is None:
        config = DemoConfig()

    logger.info(
        "Running demo: %d names, %d numbers, chunk size %d",
        len(config.names), len(config.numbers), config.chunk_size,
    )

    report = DemoReport(
        sum_args=list(config.sum_args),
        chunk_size=config.chunk_size,
        original_numbers=list(config.numbers),
    )
    report.sum_result = sum_values(*config.sum_args)
    report.capitalized = [(name, capitalize(name)) for name in config.names]
    report.kebab_cased = [(name, kebab_case(name)) for name in config.names]
    report.chunks = chunk(config.names, config.chunk_size)
    report.unique_numbers = unique(config.numbers)

    logger.debug("Demo produced %d chunks", len(report.chunks))
    return report


def format_report(report: DemoReport) -> str:
    """Render a DemoReport as console text."""
    lines = ["=== Web App Demo ==="]
    lines.append(f"Sum {report.sum_result}")

    lines.append("")
    lines.append("Capitalized names:")
    for name, result in report.capitalized:
        lines.append(f"{name} -> {result}")

    lines.append("")
    lines.append("Kebab case names:")
    for name, result in report.kebab_cased:
        lines.append(f"{name} -> {result}")

    lines.append("")
    lines.append(f"Chunked names (size {report.chunk_size}):")
    for index, names in enumerate(report.chunks, 1):
        lines.append(f"Chunk {index}: {names}")

    lines.append("")
    lines.append("Unique numbers:")
    lines.append(f"Original: {report.original_numbers}")
    lines.append(f"Unique: {report.unique_numbers}")

    lines.append("")
    lines.append("=== Demo Complete ===")
    return "\n".join(lines)


__all__ = ["DemoReport", "run_demo", "format_report"]
