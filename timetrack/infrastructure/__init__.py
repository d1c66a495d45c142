"""
Infrastructure layer for the timesheet service.

Implements the domain interfaces against external systems:
- Database (SQLAlchemy)
- Authentication (JWT bearer tokens)
- Task/user directory and notification services (HTTP via requests)
- Web API (FastAPI)
"""
