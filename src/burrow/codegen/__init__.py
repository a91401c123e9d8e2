"""Route declarations — typing artifacts derived from the route table."""

from burrow.codegen.declarations import (
    GenerateResult,
    generate_declarations,
    generate_routes,
    write_declarations,
)

__all__ = [
    "GenerateResult",
    "generate_declarations",
    "generate_routes",
    "write_declarations",
]
