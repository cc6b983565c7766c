"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: apply device action, dispatch command, register device, summarize usage
- Services: device, control and usage services used by the API layer
- DTOs: Pydantic request/response models
"""
