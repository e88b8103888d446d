"""Catalog domain: the fixed item collection, service identity and wire models.

Nothing here talks HTTP. The API layer (`k8s_demo.api`) serves these objects and
the dashboard (`k8s_demo.webui`) validates responses against `schemas`.
"""
