"""Keys, ranges, codec, backoff, retry, config and an in-memory store for a key-value client."""

__version__ = "0.1.0"

__all__ = [
    "backoff",
    "bound_range",
    "cli",
    "codec",
    "config",
    "key",
    "kvpair",
    "kvstore",
    "retry",
    "streams",
]