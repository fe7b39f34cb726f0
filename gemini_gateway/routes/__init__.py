"""Route blueprints package for API endpoints.

Contains the generation endpoints (text, image, document, audio) and
the API docs routes. Each module documents its JSON contracts.
"""
