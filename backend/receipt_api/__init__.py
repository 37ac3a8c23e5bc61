"""Top-level application package for the receipt tracking API.

This package contains the FastAPI backend that stores users, receipts
and receipt line items in process memory and exposes them over
HTTP/JSON. It includes Pydantic schemas, the in-memory store service
and the API routers.

To run the API locally you can execute:

```bash
uvicorn receipt_api.api.main:app --reload
```

This will serve the FastAPI application on http://localhost:8000 and
automatically reload on code changes. All data lives in memory and is
lost when the process exits. You can override configuration values using
environment variables or a ``.env`` file at the project root.
"""

__all__: list[str] = []
