"""Domain layer - core business objects and interfaces.

This layer contains:
- Domain entities (flights, bookings, accounts)
- Storage and credential interfaces
- Domain exceptions
"""
