"""
Infrastructure Layer Package

HTTP gateways, the MongoDB-backed key-value store, repositories and
background services.
"""
