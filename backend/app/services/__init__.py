# Services package init
"""
GameShelf Backend — Services Package
======================================

Business logic layer between routes and the database.

Services:
    - game_service: validation and persistence for Game records
"""
