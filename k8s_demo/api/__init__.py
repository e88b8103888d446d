"""HTTP API layer (FastAPI).

Read-only endpoints over the catalog:
- `GET /health` liveness with a timestamp
- `GET /api/items` and `GET /api/items/{id}`
- `GET /api/info` service identity and pod placement

The layer is thin: data and wire models live in `k8s_demo.catalog`.
"""
