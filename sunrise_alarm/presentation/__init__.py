"""
Presentation Layer Package

HTTP surface of the sunrise alarm service.
"""
