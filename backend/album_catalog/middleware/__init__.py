# Middleware package init
"""
Album Catalog Backend — Middleware Package
===========================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line and any handler logging
    carry the same correlation ID; it is also added to every response.
"""
