# Routes package init
"""
Noteful API — API Routes Package
================================

Route Inventory:
    - notes.py:    /api/notes, /api/notes/{id}      (GET, POST, PATCH, DELETE)
    - folders.py:  /api/folders, /api/folders/{id}  (GET, POST, PATCH, DELETE)
    - health.py:   GET /  (greeting), GET /health  (database probe)

Routes stay thin: read the body, validate, call a store, pick the status
code and headers. SQL lives in the stores.
"""
