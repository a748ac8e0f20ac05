"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- HTTP plumbing shared by resource clients
- The albums API client and its mapper
- Logging adapters

Structure:
- http/: RequestSpec and the base resource API client (httpx)
- albums/: Albums API client and JSON mapper
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
