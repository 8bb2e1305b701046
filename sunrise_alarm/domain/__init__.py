"""
Domain Layer Package

Coordinates, forecasts, alarm slots and the pure schedule computations.
Nothing here depends on frameworks or infrastructure concerns.
"""

from sunrise_alarm.domain import entities, gateways, ports, repositories, services

__all__ = ["entities", "gateways", "ports", "repositories", "services"]
