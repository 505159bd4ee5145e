"""Analysis layer: size measurement, bundle aggregation, route resolution."""

from .aggregate import sum_sizes, unique_paths  # noqa: F401
from .measure import SizeCache, gzip_size, measure_bytes  # noqa: F401
from .routes import SOURCE_EXTENSIONS, RouteResolver  # noqa: F401

__all__ = [
    "SizeCache",
    "RouteResolver",
    "SOURCE_EXTENSIONS",
    "gzip_size",
    "measure_bytes",
    "sum_sizes",
    "unique_paths",
]
