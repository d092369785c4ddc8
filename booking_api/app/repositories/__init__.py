"""
Repository layer.

Repositories wrap the SQLite queries for one table each.  Services use
them instead of talking to ``core.db`` directly, which keeps business
rules (filtering, pagination, authorisation) free of SQL.
"""
