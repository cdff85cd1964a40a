"""
AI Search Service

Demonstration endpoint that classifies a search query as rejected, cached
or streamed and delivers the result over a single Server-Sent-Events stream.
"""

__version__ = "1.0.0"
