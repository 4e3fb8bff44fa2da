"""
Wanderlust Backend: Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [CORS] → Route Handler

    Request ID binds the correlation ID first, so the access line and every
    service/handler log record written during the request carry it
    (through RequestIDLogFilter on the root handler).
"""
