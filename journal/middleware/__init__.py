# Middleware package init
"""
Journal — Middleware Package
=============================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assigns the correlation id used by every log line
    2. Logging: one access line per request, with the id and duration
    3. GZip: compresses responses of 500 bytes or more
    4. CORS: FastAPI's CORSMiddleware (handles browser preflight)

The catch-all 500 handler runs outside this chain and sets X-Request-ID
itself.

Responses travel back through the chain in reverse order.
"""
