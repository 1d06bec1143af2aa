"""
Core infrastructure: settings, logging, the SQLite store handle and the
error taxonomy shared by the services and the API layer.
"""
