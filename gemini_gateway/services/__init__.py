"""Service layer package.

Contains the Gemini inference adapter (``llm_service``) and the
request-scoped upload staging helpers (``upload_service``) used by routes.
"""
