"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- Plain decision traces
- JSON and YAML dumps
- Rich tables for outcomes and chain descriptions
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

DECISION_STYLES = {"approved": "green", "forwarded": "yellow", "rejected": "red"}


def format_output(data: Dict[str, Any], format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip()
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "text":
        return format_text_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_text_output(data: Dict[str, Any]) -> str:
    """Decision lines for outcomes, one summary line per handler for a chain."""
    if "outcomes" in data:
        return "\n".join(
            step["message"] for outcome in data["outcomes"] for step in outcome["steps"]
        )
    if "chain" in data:
        lines = []
        for handler in data["chain"]:
            kind = "terminal" if handler["terminal"] else "forwards"
            lines.append(
                f"{handler['position']}. {handler['name']} - up to {handler['threshold']:g} day(s) ({kind})"
            )
        return "\n".join(lines)
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Dict[str, Any]) -> str:
    """Format data as a table."""
    if "outcomes" in data:
        return format_outcomes_table(data["outcomes"])
    elif "chain" in data:
        return format_chain_table(data["chain"])
    return json.dumps(data, indent=2, default=str)


def format_outcomes_table(outcomes: List[Dict[str, Any]]) -> str:
    """One row per submitted request."""
    if not outcomes:
        return "No requests submitted."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Days", style="cyan", justify="right")
    table.add_column("Decision")
    table.add_column("Decided By", style="blue")
    table.add_column("Forwards", justify="right")

    for outcome in outcomes:
        decision = outcome.get("decision") or "N/A"
        style = DECISION_STYLES.get(decision, "")
        table.add_row(
            f"{outcome['days']:g}",
            f"[{style}]{decision}[/{style}]" if style else decision,
            str(outcome.get("decided_by") or "N/A"),
            str(outcome.get("forward_count", 0)),
        )

    return _render(table)


def format_chain_table(chain: List[Dict[str, Any]]) -> str:
    """One row per handler, head first."""
    if not chain:
        return "No handlers configured."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Handler", style="green")
    table.add_column("Level")
    table.add_column("Max Days", style="yellow", justify="right")
    table.add_column("Terminal")

    for handler in chain:
        table.add_row(
            str(handler["position"]),
            handler["name"],
            handler.get("level") or "-",
            f"{handler['threshold']:g}",
            "yes" if handler["terminal"] else "no",
        )

    return _render(table)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip()
