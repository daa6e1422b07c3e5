# Routes package init
"""
Journal — API Routes Package
=============================

Route Inventory:
    - entries.py: GET    /api/entries              (list all entries)
                  GET    /api/entries/{entryId}    (single entry)
                  POST   /api/entries              (create)
                  PUT    /api/entries/{entryId}    (full replace)
                  DELETE /api/entries/{entryId}    (delete)
    - health.py:  GET    /health                   (service health check)

Routes are thin: extract the path value and body, call EntryService,
return its result. Business rules live in services.
"""
