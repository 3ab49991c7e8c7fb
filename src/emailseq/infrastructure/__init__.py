"""Infrastructure layer — database engine, schema, migrations, repositories.

This layer depends on stdlib, SQLAlchemy and Alembic, and on the domain
models it persists. It must never import from services, api, or commands.
"""
