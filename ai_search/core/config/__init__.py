"""
Configuration Module

This module provides centralized, type-safe configuration management
for the AI search service.

Components:
-----------
- **settings.py**: Pydantic-based configuration with environment variable loading
- **constants.py**: System-wide constants, enums and wire-level names

Usage:
------
```python
from ai_search.core.config import get_settings
from ai_search.core.config.constants import Stage, TransportState

settings = get_settings()
delay = settings.generator.GENERATOR_CHUNK_DELAY_MAX

stage = Stage.CACHE_LOOKUP  # "2.0_CACHE_LOOKUP"
```

Environment Variables:
---------------------
Configuration is loaded from environment variables or `.env` file:

```bash
# Application
ENVIRONMENT=production
API_BASE_PATH=/api
ENABLE_DEMO_PAGE=false

# Logging
LOG_LEVEL=INFO
LOG_FORMAT=json

# Simulated generation latency (seconds)
GENERATOR_CHUNK_DELAY_MIN=0.1
GENERATOR_CHUNK_DELAY_MAX=0.5
```

Testing:
-------
```python
import os
from ai_search.core.config import reload_settings

os.environ["LOG_LEVEL"] = "DEBUG"
settings = reload_settings()
assert settings.logging.LOG_LEVEL == "DEBUG"
```
"""

from ai_search.core.config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
