"""
Gateways Package - Domain Layer

Contracts for the external capabilities: the sunrise service, the
platform alarm clock and the location provider. Implementations live
in the infrastructure layer.
"""

from .alarm_gateway import IAlarmGateway
from .location_gateway import ILocationGateway
from .sunrise_gateway import ISunriseGateway

__all__ = ["IAlarmGateway", "ILocationGateway", "ISunriseGateway"]
