"""Depth-first search over a widget hierarchy."""

from typing import Any, Callable, Iterable, List, Optional


def _tk_children(widget) -> Iterable:
    return widget.winfo_children()


def find_widgets(
    root: Any,
    predicate: Callable[[Any], bool],
    children: Optional[Callable[[Any], Iterable]] = None,
) -> List[Any]:
    """Collect every descendant of ``root`` matching ``predicate``.

    Pre-order, children visited in the order ``children`` returns them.
    The root itself is not tested. Defaults to tkinter's winfo_children().
    """
    children = children or _tk_children
    found: List[Any] = []
    for child in children(root):
        if predicate(child):
            found.append(child)
        found.extend(find_widgets(child, predicate, children))
    return found
