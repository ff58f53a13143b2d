"""
chkd status / chkd search - Show spec progress and find items.
"""

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from chkd.lib.config import SpecConfig
from chkd.spec.parser import parse_file
from chkd.spec.resolver import find_area, find_items, iter_items

STATUS_STYLE = {
    "open": ("[ ]", "white"),
    "in-progress": ("[~]", "yellow"),
    "done": ("[x]", "green"),
    "skipped": ("[-]", "dim"),
    "blocked": ("[!]", "red"),
}

AREA_STYLE = {
    "complete": "green",
    "in-progress": "yellow",
    "pending": "white",
}


def _item_label(item, show_ids: bool) -> Text:
    marker, style = STATUS_STYLE[item.status]
    label = Text(f"{marker} ", style=style)
    if item.priority:
        label.append(f"P{item.priority} ", style="bold magenta")
    label.append(item.title, style=style if item.status != "open" else "")
    if item.tags:
        label.append(" " + " ".join(f"#{t}" for t in item.tags), style="cyan")
    if show_ids:
        label.append(f"  {item.id}", style="dim")
    return label


def _add_children(node, items, depth: int, max_depth: int, show_ids: bool):
    for item in items:
        child = node.add(_item_label(item, show_ids))
        if item.children and (max_depth < 0 or depth < max_depth):
            _add_children(child, item.children, depth + 1, max_depth, show_ids)


def cmd_status(args, config: SpecConfig, console: Console = None) -> int:
    """Show areas, items and progress as a tree."""
    console = console or Console()
    document = parse_file(config.spec_path)

    areas = document.areas
    if args.area:
        areas = [find_area(document, args.area)]

    title = document.title or config.spec_path.name
    tree = Tree(Text(f"{title}  {document.completed_items}/{document.total_items} ({document.progress}%)", style="bold"))

    for area in areas:
        label = Text(f"{area.code}  {area.name}", style=f"bold {AREA_STYLE[area.status]}")
        node = tree.add(label)
        items = area.items
        if args.open:
            items = [i for i in items if not i.completed]
        _add_children(node, items, 0, -1 if args.all else 0, args.ids)

    console.print(tree)
    return 0


def cmd_search(args, config: SpecConfig, console: Console = None) -> int:
    """List items whose title, description or id contains the query."""
    console = console or Console()
    document = parse_file(config.spec_path)

    matches = find_items(document, args.query)
    if not matches:
        print(f'No items found for "{args.query}"')
        return 1

    for item in matches:
        console.print(_item_label(item, show_ids=True))
    print()
    print(f"{len(matches)} of {sum(1 for _ in iter_items(document))} items")
    return 0
