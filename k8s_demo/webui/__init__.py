"""Dashboard client for the catalog service.

- `client`: async httpx wrapper around the four endpoints
- `surface`: presentation regions plus event listener registration
- `notifier`: transient notices with auto-dismiss
- `dashboard`: the controller tying them together
- `render`: rich rendering of a surface for the terminal CLI
"""
