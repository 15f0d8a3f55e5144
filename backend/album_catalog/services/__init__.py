# Services package init
"""
Album Catalog Backend — Services Layer
=======================================

What:  Business logic sitting between routes (HTTP) and the album collection.
How:   Services are injected into routes via FastAPI's dependency injection.

Service Inventory:
    - AlbumStore: Ordered in-memory album collection (list, get, add)
"""
