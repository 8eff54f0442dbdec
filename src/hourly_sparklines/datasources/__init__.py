"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Dataclasses for API responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions use ``services.http.session`` and return models, never raw
JSON, so nothing downstream needs to know the provider's schema.
"""
