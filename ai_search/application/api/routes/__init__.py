"""
API Routes

- **search**: ``GET /ai-search`` SSE endpoint
- **health**: ``GET /health`` and ``GET /metrics``
- **demo**: ``GET /`` browser demo page
"""
