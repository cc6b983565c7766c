"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Device, UsageLogEntry, command intents and results
- Repository Interfaces: Abstract contracts for the device registry and usage log
- Exceptions: Errors surfaced to callers of the control core
"""
