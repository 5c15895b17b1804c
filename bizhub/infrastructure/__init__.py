"""
Infrastructure layer.

Implementations of the ports defined in the application layer:

- Persistence (generic SQLAlchemy repository)
- Web framework (FastAPI routers and response envelopes)
- Local file storage for uploaded media
- Dependency injection helpers
"""
