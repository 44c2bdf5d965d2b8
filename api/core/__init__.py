"""
Pieces shared by every feature: settings, the asyncpg pool, logging setup and
the error-to-response mapping.
"""
