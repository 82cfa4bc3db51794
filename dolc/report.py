"""Rich terminal report for a compile result.

Renders a status header, the declaration tree, and a diagnostics table
using the Rich library.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from dolc.core.types import CompileResult
from dolc.dsl.ast_nodes import AstNode, SpiritNode


def render_result(
    result: CompileResult,
    console: Console | None = None,
    source_name: str = "<source>",
) -> None:
    """Print a full report of ``result`` to ``console`` (stdout by default)."""
    console = console or Console()
    console.print(_render_header(result, source_name))
    if result.ast:
        console.print(_render_tree(result.ast, source_name))
    console.print(_render_diagnostics(result))


def _render_header(result: CompileResult, source_name: str) -> Panel:
    meta = result.metadata
    status = "[green bold]OK[/green bold]" if result.success else "[red bold]FAILED[/red bold]"
    summary = (
        f"{status} | spirits: {meta.spirit_count} | functions: {meta.function_count} "
        f"| lines: {meta.source_line_count}"
    )
    return Panel(
        summary,
        title=f"[bold]dolc {meta.compiler_version}[/bold] {escape(source_name)}",
        border_style="green" if result.success else "red",
    )


def _render_tree(ast: list[AstNode], source_name: str) -> Tree:
    tree = Tree(f"[bold]{escape(source_name)}[/bold]")
    for node in ast:
        _add_node(tree, node)
    return tree


def _add_node(parent: Tree, node: AstNode) -> None:
    if isinstance(node, SpiritNode):
        branch = parent.add(f"[cyan]spirit[/cyan] {node.name} [dim](line {node.line})[/dim]")
        for child in node.body:
            _add_node(branch, child)
    else:
        parent.add(f"[yellow]fn[/yellow] {node.name}() [dim](line {node.line})[/dim]")


def _render_diagnostics(result: CompileResult) -> Table | str:
    diagnostics = [*result.errors, *result.warnings]
    if not diagnostics:
        return "[dim]No diagnostics[/dim]"

    table = Table(title="Diagnostics", expand=True)
    table.add_column("Line", style="cyan", width=6, justify="right")
    table.add_column("Col", style="cyan", width=4, justify="right")
    table.add_column("Category", width=12)
    table.add_column("Message", style="white")

    for diagnostic in diagnostics:
        style = "red bold" if diagnostic.is_error else "yellow"
        table.add_row(
            str(diagnostic.line),
            str(diagnostic.column),
            f"[{style}]{diagnostic.category.value}[/{style}]",
            escape(diagnostic.message),
        )

    return table
