# Routes package init
"""
GameShelf Backend — API Routes Package
========================================

Route Inventory:
    - games.py:   POST   /api/game/create
                  GET    /api/game/get
                  DELETE /api/game/destroy/{id}
                  PUT    /api/game/update
    - health.py:  GET    /health

Routes are thin: they pull data out of the request, call the service and
return its result. Status codes for failures come from the global exception
handlers in main.py.
"""
