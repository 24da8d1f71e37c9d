"""Exceptions raised by the netstats analysis functions."""


class NetstatsError(Exception):
    """Base class for every error raised by netstats."""


class InvalidNode(NetstatsError, LookupError):
    """An operation referenced a node or raw label that is not in the graph."""

    def __init__(self, node, message: str = None):
        self.node = node
        super().__init__(message or f"Node '{node}' not found in graph.")

    def __str__(self) -> str:
        return self.args[0]


class InvalidArgument(NetstatsError, ValueError):
    """A size, depth, threshold or cost argument is out of range."""


class DistanceCollectionTimeout(NetstatsError, TimeoutError):
    """Distance collection ran past its time limit; the partial sample is dropped."""

    def __init__(self, time_limit: float, sources_done: int, sources_total: int):
        self.time_limit = time_limit
        self.sources_done = sources_done
        self.sources_total = sources_total
        super().__init__(
            f"Distance collection exceeded {time_limit:g}s after "
            f"{sources_done}/{sources_total} source(s)."
        )


def check_int(value, name: str, minimum: int = 0) -> int:
    """
    Return value if it is an int no smaller than minimum.

    Raises:
        InvalidArgument: For bools, floats, None and values below minimum
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        bound = {0: "a non-negative integer", 1: "a positive integer"}.get(
            minimum, f"an integer >= {minimum}")
        raise InvalidArgument(f"{name} must be {bound}, got {value!r}.")
    return value
