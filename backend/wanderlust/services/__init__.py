"""
Wanderlust Backend: Services Layer
====================================

What:  Business logic between routes (HTTP) and the database (persistence).

Service Inventory:
    - ContactService:   validate → store contact submissions; list them
    - FavouriteService: duplicate-checked add, delete by id, list

Services take the AsyncSession as an argument and raise the exceptions in
wanderlust.exceptions; HTTP status codes are decided by the global handlers.
"""
