"""
Infrastructure Layer
====================

Concrete storage backends for the domain repository interfaces.

Contains:
- memory: in-process registry and usage log
- db: MongoDB registry and usage log
"""
