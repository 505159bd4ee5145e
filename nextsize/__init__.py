"""nextsize package.

Measures the raw and gzip size of a Next.js build's script bundles,
attributes chunks to pages and routes, and diffs two runs:

- nextsize/analysis      — size measurement, aggregation, route resolution
- nextsize/core          — SizeEntry / Snapshot data model
- nextsize/evolution     — diff between previous and current snapshot
- nextsize/storage       — analysis file locations and JSON persistence
- nextsize/manifests     — bundler manifest loading and compat shims
- nextsize/orchestration — logging and the end-to-end analysis run

Presentation lives in the top-level `report` package, argument wiring in `cli`.
"""

__version__ = "0.4.1"
