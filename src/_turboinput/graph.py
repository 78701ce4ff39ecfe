from _turboinput.tokenizer.errors import FormatError


def adjacency(edges, n, directed=False):
    """
    Build adjacency lists for vertices numbered 1 to n.

    >>> adjacency([(1, 2), (2, 3)], 3)
    {1: [2], 2: [1, 3], 3: [2]}

    :param edges: Iterable of (u, v) vertex pairs.
    :param n: The number of vertices.
    :param directed: If False, every edge is added in both directions.
    :returns: Dictionary from each vertex to its neighbours, in the order
        the edges were given.
    """
    if n < 0:
        raise ValueError(f"Number of vertices has to be non-negative, got {n}")
    adj = {vertex: [] for vertex in range(1, n + 1)}
    for u, v in edges:
        for vertex in (u, v):
            if vertex not in adj:
                raise FormatError(
                    f"Edge ({u}, {v}) has vertex {vertex} outside of 1..{n}",
                    typ=int,
                )
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj
