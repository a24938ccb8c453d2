"""
API package containing the HTTP routes.

``router`` aggregates the domain routers; ``deps`` holds the FastAPI
dependencies they share.
"""
