"""HTTP API server for the subtitle to Word converter.

WHY: Upload pages and automation tools need to run exports without a
local Python install. This package exposes the export pipeline over HTTP.

HOW: app.py defines the FastAPI application and routes, models.py the
Pydantic response schemas.

RULES:
- Runnable as: python -m subtitle_docx --serve (or subtitle-docx-api)
- Requests are handled synchronously; nothing is stored between requests
"""
