# Routes package init
"""
Blog API Backend — API Routes Package
======================================

Route Inventory:
    - users.py:   GET/POST /users, GET/PUT/DELETE /users/{id}
    - posts.py:   GET/POST /posts, GET/PUT/DELETE /posts/{id}
    - health.py:  GET /health

Routes stay thin: they read path and body, call a service, and return its
result. Status codes for failures come from the exception handlers in main.py.
"""
