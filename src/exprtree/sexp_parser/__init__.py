"""S-expression notation for expression trees."""

from exprtree.sexp_parser.tree_loader import TreeLoader

__all__ = ["TreeLoader"]
