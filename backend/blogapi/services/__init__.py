# Services package init
"""
Blog API Backend — Services Layer
==================================

What:  The resource handlers, sitting between routes (HTTP) and repositories
       (storage).
How:   Each service is constructed with its repository and holds no other
       state. Routes obtain them through the providers in blogapi.deps.

Service Inventory:
    - UserService: list / create / get / update / delete users
    - PostService: list / create / get / update / delete posts, always populated
"""

from blogapi.services.post_service import PostService
from blogapi.services.user_service import UserService

__all__ = ["PostService", "UserService"]
