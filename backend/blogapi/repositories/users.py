"""User collection storage."""

from sqlalchemy.exc import IntegrityError

from blogapi.exceptions import BlogError, DuplicateEmailError
from blogapi.models import User
from blogapi.repositories.base import Repository


class UserRepository(Repository[User]):
    model = User

    def conflict_error(self, exc: IntegrityError) -> BlogError:
        # email is the only unique column besides the primary key
        if "email" in str(exc.orig).lower():
            return DuplicateEmailError()
        return super().conflict_error(exc)
