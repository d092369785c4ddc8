"""
Service layer.

Each service encapsulates the business rules of a domain and is called
by the API handlers.  Services reach the database only through the
repositories in ``app.repositories``.
"""
