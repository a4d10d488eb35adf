"""Human-readable rendering of standup and repository results.

Each op in ``_OP_RENDERERS`` draws its result onto a buffered console:
single records as indented fields, listings as tables, ``hello``/``format``
as bare text. Ops without an entry get every ``data`` key printed.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from quickstand.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from quickstand.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Draw *result* and return the text without its trailing newline."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        ids = [str(item["id"]) for item in items if isinstance(item, dict) and "id" in item]
        return "\n".join(ids)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "qs.ok"), (f"  {result.op}", "qs.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="qs.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="qs.id")
    elif key == "path":
        v = Text(str(value), style="qs.path")
    elif key == "name":
        v = Text(str(value), style="qs.name")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "qs.error"), (f"  {result.op}", "qs.op"), f" — {msg}"))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Standup renderers ─────────────────────────────────────────────────


def _render_standup(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single standup after create/get/update/membership edits."""
    _status_line(console, result)
    d = result.data
    for key in ("id", "name", "description"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    _field(console, "repositories", len(d.get("repositories", [])))
    if "fields_changed" in d:
        _field(console, "fields_changed", ", ".join(d["fields_changed"]) or "-")
    if "changed" in d:
        _field(console, "changed", d["changed"])
    if verbose:
        for key in ("created_at", "updated_at"):
            if key in d:
                _field(console, key, d[key])
        for rid in d.get("repositories", []):
            console.print(Text(f"    {rid}", style="qs.id"))


def _render_standup_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render list_standups as a table; the default standup is starred."""
    items = result.data.get("items", [])
    if not items:
        console.print("No standups found.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", style="qs.default", no_wrap=True)
    table.add_column("ID", style="qs.id", no_wrap=True)
    table.add_column("Name", style="qs.name")
    table.add_column("Repos", justify="right")
    table.add_column("Description")
    if verbose:
        table.add_column("Updated", style="dim")

    for item in items:
        row = [
            "*" if item.get("default") else "",
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(len(item.get("repositories", []))),
            str(item.get("description") or ""),
        ]
        if verbose:
            row.append(str(item.get("updated_at", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} standups")


# ── Repository renderers ──────────────────────────────────────────────


def _render_repository(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single repository after add/get/update."""
    _status_line(console, result)
    d = result.data
    for key in ("id", "name", "path", "standup_id"):
        if key in d:
            _field(console, key, d[key])
    if "active" in d:
        _field(console, "status", "active" if d["active"] else "inactive")
    if "fields_changed" in d:
        _field(console, "fields_changed", ", ".join(d["fields_changed"]) or "-")


def _render_repository_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No repositories found.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="qs.id", no_wrap=True)
    table.add_column("Name", style="qs.name")
    table.add_column("Status")
    table.add_column("Path", style="qs.path")

    for item in items:
        label = "active" if item.get("active") else "inactive"
        status = Text(label, style=f"qs.{label}")
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name", "")),
            status,
            str(item.get("path", "")),
        )

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} repositories")


# ── Removal / text renderers ──────────────────────────────────────────


def _render_removal(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("id", "name", "path", "default_standup_id"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    if "standups_updated" in d:
        _field(console, "standups_updated", len(d["standups_updated"]))
        if verbose:
            for sid in d["standups_updated"]:
                console.print(Text(f"    {sid}", style="qs.id"))


def _render_text(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print ``data["text"]`` verbatim (hello / format)."""
    console.print(Text(str(result.data.get("text", ""))))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Standups
    "create_standup": _render_standup,
    "get_standup": _render_standup,
    "update_standup": _render_standup,
    "set_default_standup": _render_standup,
    "get_default_standup": _render_standup,
    "add_repository_to_standup": _render_standup,
    "remove_repository_from_standup": _render_standup,
    "remove_standup": _render_removal,
    "list_standups": _render_standup_table,
    # Repositories
    "add_repository": _render_repository,
    "get_repository": _render_repository,
    "update_repository": _render_repository,
    "remove_repository": _render_removal,
    "list_repositories": _render_repository_table,
    # Text helpers
    "hello": _render_text,
    "format": _render_text,
}
