"""
Routers module - API endpoint handlers organized by feature.

- command: natural language command ingress and pipeline stats
- inventory: device inventory read and refresh
"""
