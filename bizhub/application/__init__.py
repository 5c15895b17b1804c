"""
Application layer.

Command and query services that sequence repository calls for each
business context and translate between entities and DTOs.

This layer contains:
- Result and PaginatedResult: uniform outcome wrappers
- Specifications: declarative filter and eager-load descriptors
- Protocols: interfaces for repositories and file storage
- Services: per-entity command and query façades
- DTOs and mappers
"""
