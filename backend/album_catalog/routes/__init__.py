# Routes package init
"""
Album Catalog Backend — API Routes Package
===========================================

Route Inventory:
    - albums.py:  GET  /albums             (list all albums)
                  GET  /albums/{id}        (get single album)
                  POST /albums             (add an album)
    - ping.py:    GET  /api/               (API ping)
    - health.py:  GET  /health             (service health check)

Routes are THIN: they extract path/body data, call the AlbumStore, and
let FastAPI serialize the result. Errors propagate to the global handlers.
"""
