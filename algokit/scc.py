"""Strongly connected components by Tarjan's algorithm."""

from collections.abc import Iterable

__all__ = ["tarjan_scc", "parse_cases"]


def tarjan_scc(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Strongly connected components of a directed graph on vertices ``1 .. n``.

    Components are listed in the order they are completed; the vertices of
    each come in the order they leave the stack, the component's root last.
    Depth-first searches start from vertices ``1 .. n`` in turn.
    """
    adjacency: dict[int, list[int]] = {v: [] for v in range(1, n + 1)}
    for u, v in edges:
        if u not in adjacency or v not in adjacency:
            raise ValueError(f"edge ({u}, {v}) leaves the vertex range 1..{n}")
        adjacency[u].append(v)

    num = dict.fromkeys(adjacency, 0)
    low = dict.fromkeys(adjacency, 0)
    on_stack = dict.fromkeys(adjacency, False)
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 1

    def visit(u: int) -> None:
        nonlocal counter
        num[u] = low[u] = counter
        counter += 1
        on_stack[u] = True
        stack.append(u)

    for root in adjacency:
        if num[root]:
            continue
        visit(root)
        work = [(root, iter(adjacency[root]))]
        while work:
            u, neighbours = work[-1]
            descended = False
            for v in neighbours:
                if not num[v]:
                    visit(v)
                    work.append((v, iter(adjacency[v])))
                    descended = True
                    break
                if on_stack[v]:
                    low[u] = min(low[u], low[v])
            if descended:
                continue
            work.pop()
            if num[u] == low[u]:
                component = []
                while True:
                    v = stack.pop()
                    on_stack[v] = False
                    component.append(v)
                    if v == u:
                        break
                components.append(component)
            if work:
                parent = work[-1][0]
                if on_stack[u]:
                    low[parent] = min(low[parent], low[u])
    return components


def parse_cases(text: str) -> list[tuple[int, list[tuple[int, int]]]]:
    """Parse ``N M`` headers each followed by ``M`` edges, up to ``0 0``."""
    tokens = iter(int(token) for token in text.split())
    cases: list[tuple[int, list[tuple[int, int]]]] = []
    for n in tokens:
        try:
            m = next(tokens)
        except StopIteration:
            raise ValueError("case header is missing its edge count") from None
        if n == 0 and m == 0:
            break
        try:
            edges = [(next(tokens), next(tokens)) for _ in range(m)]
        except StopIteration:
            raise ValueError("fewer edges than announced") from None
        cases.append((n, edges))
    return cases