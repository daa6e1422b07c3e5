# Services package init
"""
Journal — Services Layer
=========================

What:  Business logic between routes (HTTP) and the database.
How:   Services take the request's session plus plain inputs, validate,
       run their statement, and return response schemas.

Service Inventory:
    - EntryService: entry id / field validation and the five CRUD statements
"""
