"""
Application Layer

FastAPI app factory, routes, middleware and the search service.
"""
