"""Infrastructure layer — SQLite engine and storage collaborators.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It may import domain models so repositories can hand back ``Training``
snapshots, but it must never import from services, commands, or output.
"""
