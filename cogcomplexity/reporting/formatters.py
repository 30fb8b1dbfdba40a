from __future__ import annotations

import io
from typing import Iterable, Iterator, Mapping, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from cogcomplexity.core.output import Container, FileOutput, encode_program_output


ANONYMOUS = "<anonymous>"


def format_json(files: Mapping[str, FileOutput]) -> str:
    return encode_program_output(files, indent=2) + "\n"


def format_text(
    files: Mapping[str, FileOutput],
    errors: Sequence[str] = (),
    use_color: bool = False,
    width: int = 100,
) -> str:
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        force_terminal=use_color,
        color_system="standard" if use_color else None,
        highlight=False,
    )
    tree = Tree("[bold]Cognitive Complexity[/bold]")
    for path, output in files.items():
        branch = tree.add(f"{escape(path)}  [bold]{output.score}[/bold]")
        _add_containers(branch, output.inner)
    console.print(tree)
    total = sum(output.score for output in files.values())
    console.print(f"Files analyzed: {len(files)}")
    console.print(f"Total score: {total}")
    if errors:
        console.print(f"Errors: {len(errors)}")
        for error in errors:
            console.print(f"  - {escape(error)}")
    return buffer.getvalue()


def _add_containers(branch: Tree, containers: Iterable[Container]) -> None:
    for container in containers:
        label = escape(container.name or ANONYMOUS)
        child = branch.add(
            f"{label} [dim]({container.line}:{container.column})[/dim]  [bold]{container.score}[/bold]"
        )
        _add_containers(child, container.inner)


def iter_containers(containers: Iterable[Container]) -> Iterator[Container]:
    for container in containers:
        yield container
        yield from iter_containers(container.inner)


def containers_over(files: Mapping[str, FileOutput], threshold: int) -> list[Tuple[str, Container]]:
    """Every container, at any depth, scoring above ``threshold``."""
    return [
        (path, container)
        for path, output in files.items()
        for container in iter_containers(output.inner)
        if container.score > threshold
    ]
