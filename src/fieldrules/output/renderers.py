"""Human-readable rendering of ServiceResult objects.

Successful results go through a renderer chosen by ``result.op``; any op
without its own renderer prints its data as ``key: value`` lines.
Failed results share one renderer.  For rule failures it prints one line
per field, ``Field [rule=param] message``.

All text passes through :class:`rich.text.Text`, never through markup
parsing, because messages and values can contain square brackets.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fieldrules.output.console import create_console, get_output, style_for_source

if TYPE_CHECKING:
    from rich.console import Console

    from fieldrules.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console", bool], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as text; plain when not writing to a terminal."""
    console = create_console()
    if result.ok:
        _RENDERERS.get(result.op, _render_data)(result, console, verbose)
    else:
        _render_failure(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line per result, or the rule names for a listing."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    items = result.data.get("items")
    if isinstance(items, list) and items:
        return "\n".join(str(i["name"]) for i in items if isinstance(i, dict))
    return f"OK: {result.op}"


# -- building blocks -------------------------------------------------------


def _headline(console: Console, status: str, op: str, tail: str | None = None) -> None:
    line = Text()
    line.append(status, style="fr.ok" if status == "OK" else "fr.error")
    line.append(f"  {op}", style="fr.op")
    if tail:
        line.append(f" — {tail}")
    console.print(line)


def _pairs(console: Console, pairs: Iterable[tuple[str, Any]], indent: int = 2) -> None:
    for key, value in pairs:
        if isinstance(value, dict | list):
            value = json.dumps(value, separators=(",", ":"))
        line = Text(" " * indent)
        line.append(f"{key}: ", style="fr.key")
        line.append(str(value))
        console.print(line)


def _meta(console: Console, result: ServiceResult, verbose: bool) -> None:
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        _pairs(console, result.meta.items(), indent=4)


def _rule_label(error: dict[str, Any]) -> str:
    rule = str(error.get("rule", ""))
    param = error.get("param")
    return f"{rule}={param}" if param else rule


# -- failures --------------------------------------------------------------


def _render_failure(result: ServiceResult, console: Console, verbose: bool) -> None:
    err = result.error
    field_errors = err.detail.get("errors") if err else None
    if not field_errors:
        _headline(console, "ERROR", result.op, err.message if err else "Unknown error")
        if verbose and err and err.detail:
            console.print(Text("  detail:", style="dim"))
            _pairs(console, err.detail.items(), indent=4)
        return

    count = len(field_errors)
    _headline(console, "ERROR", result.op, f"{count} rule failure{'' if count == 1 else 's'}")
    for item in field_errors:
        line = Text("  ")
        line.append(str(item.get("field", "")), style="fr.field")
        line.append(" [")
        line.append(_rule_label(item), style="fr.rule")
        line.append("] ")
        line.append(str(item.get("message", "")))
        console.print(line)
        if verbose:
            extras = [("value", repr(item.get("value")))]
            extras += [(k, item[k]) for k in ("kind", "detail") if item.get(k)]
            _pairs(console, extras, indent=4)


# -- successes -------------------------------------------------------------


def _render_check_value(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, "OK", result.op)
    _pairs(console, [("value", result.data.get("value")), ("tag", result.data.get("tag", ""))])
    _meta(console, result, verbose)


def _render_validate_record(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, "OK", result.op)
    _pairs(console, [("fields", result.data.get("fields", 0))])
    _meta(console, result, verbose)


def _render_rules(result: ServiceResult, console: Console, verbose: bool) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No rules registered.")
        return

    table = Table(show_header=True, pad_edge=False)
    table.add_column("Rule", style="fr.rule", no_wrap=True)
    table.add_column("Source")
    table.add_column("Description")
    for item in items:
        source = str(item.get("source", ""))
        table.add_row(
            Text(str(item.get("name", ""))),
            Text(source, style=style_for_source(source)),
            Text(str(item.get("description", ""))),
        )
    console.print(table)
    if verbose:
        console.print(Text(f"{result.data.get('count', len(items))} rules", style="dim"))


def _render_data(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, "OK", result.op)
    _pairs(console, result.data.items())
    _meta(console, result, verbose)


_RENDERERS: dict[str, Renderer] = {
    "check_value": _render_check_value,
    "validate_record": _render_validate_record,
    "list_rules": _render_rules,
}
