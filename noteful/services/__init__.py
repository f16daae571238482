# Services package init
"""
Noteful API — Services Layer
============================

What:  Data-access stores sitting between routes (HTTP) and the database.
How:   Each store wraps one table and is built per request around the
       request's AsyncSession.

Service Inventory:
    - FolderStore: CRUD for noteful_folders
    - NoteStore:   CRUD for noteful_notes
"""
