"""
Sunrise Alarm - Source Root

Computes, caches and schedules weekly sunrise alarms for a location.

Layer Structure:
- Domain: Coordinates, forecasts, alarm slots and the pure schedule computations
- Application: Schedule engine, alarm scheduler, location provider and DTOs
- Infrastructure: HTTP gateways, MongoDB key-value store, repositories, Celery tasks
- Presentation: FastAPI routers exposing the user commands
- Shared: Logging, enums and pacing utilities
- Main: Settings, dependency container and entry points
"""
