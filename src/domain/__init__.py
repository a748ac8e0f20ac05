"""Domain layer - Pure data and contracts.

This layer contains the album entity, the client error types and the
protocols (ports) the other layers implement. It has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (Album, AlbumCollection)
- errors/: Album client error types (returned in Failure)
- protocols/: Ports (albums API, display sink, logger)
"""
