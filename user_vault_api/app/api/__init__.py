"""
HTTP transport layer.

``router`` aggregates the domain routers from ``endpoints``; ``deps``
provides the FastAPI dependencies that hand the wired service to each
route.
"""
