"""
Application Services

- **search_service.py**: SearchService, the filter → cache → generator dispatch
"""

from ai_search.application.services.search_service import SearchService, build_search_service

__all__ = ["SearchService", "build_search_service"]
