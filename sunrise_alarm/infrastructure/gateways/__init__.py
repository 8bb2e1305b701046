"""
Gateways Package

HTTP implementations of the domain gateway interfaces.
"""

from .alarm_hub_gateway import AlarmHubGateway
from .ip_location_gateway import IpLocationGateway
from .sunrise_sunset_gateway import SunriseSunsetGateway

__all__ = ["AlarmHubGateway", "IpLocationGateway", "SunriseSunsetGateway"]
