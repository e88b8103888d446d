"""k8s-demo: a small read-only catalog API and a dashboard that consumes it."""
