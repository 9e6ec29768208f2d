"""Union-find, weighted union-find, offline minimum, offline LCA and debug formatting."""

__version__ = "0.1.0"
__all__ = ["debug_print", "dsu", "lca", "offline_minimum", "weighted"]