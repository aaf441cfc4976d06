"""
Post collection storage, plus author population.

`populate()` resolves each post's `user_id` to the author's projection
(id, first name, last name, email) with a single IN query for the whole
batch. Ids that match no user resolve to None.
"""

from typing import List, Optional, Sequence, Tuple

from sqlalchemy import Row, select

from blogapi.models import Post, User
from blogapi.repositories.base import Repository

AUTHOR_FIELDS = (User.id, User.first_name, User.last_name, User.email)


class PostRepository(Repository[Post]):
    model = Post

    async def populate(self, posts: Sequence[Post]) -> List[Tuple[Post, Optional[Row]]]:
        user_ids = {post.user_id for post in posts}
        authors = {}
        if user_ids:
            result = await self.session.execute(
                select(*AUTHOR_FIELDS).where(User.id.in_(list(user_ids)))
            )
            authors = {row.id: row for row in result}
        return [(post, authors.get(post.user_id)) for post in posts]
