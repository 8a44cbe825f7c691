from zigrng.tables.builder import (
    ZigguratTable,
    build_table,
    closure_residual,
    solve_tail_boundary,
)
from zigrng.tables.constants import published_table

__all__ = [
    "ZigguratTable",
    "build_table",
    "closure_residual",
    "published_table",
    "solve_tail_boundary",
]
