"""
ORM mappings.

Every module in this package is imported by ``database.scan_mappers()`` at
startup so the declarative metadata knows all tables.
"""
