"""Route blueprints package for API endpoints.

- ``generate``: text and image generation backed by Gemini.
- ``media``: audio and video uploads answered with a pre-processing advisory.
"""
