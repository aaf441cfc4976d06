# Repositories package init
"""
Blog API Backend — Storage Layer
=================================

One repository per collection, each bound to a request-scoped session:
    - UserRepository: users, with email conflicts mapped to DuplicateEmailError
    - PostRepository: posts, plus populate() for author projection
"""

from blogapi.repositories.posts import PostRepository
from blogapi.repositories.users import UserRepository

__all__ = ["PostRepository", "UserRepository"]
