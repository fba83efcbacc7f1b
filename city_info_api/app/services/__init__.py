"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works
against the ``CityInfoRepository`` interface, so the same rules apply
whether cities live in memory or in SQLite.
"""
