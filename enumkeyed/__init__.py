"""Maps, option maps, vectors and bitsets keyed by the values of finite domains."""

__version__ = "0.5.0"

__all__ = ["base", "derive", "map", "opt_map", "serde", "set", "slice_iter", "vec", "words"]