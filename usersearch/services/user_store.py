import json
import os
from typing import List, Sequence

from ..schemas import MAX_LIMIT, User

ORDER_FIELDS = {"Id": "id", "Name": "name", "Age": "age"}
DEFAULT_ORDER_FIELD = "Name"


class UnknownOrderField(ValueError):
    pass


class UnknownOrderBy(ValueError):
    pass


class UserStore:
    """Users held in memory and searched the way the remote service does."""

    def __init__(self, users: Sequence[User] = ()):
        self._users = list(users)

    def __len__(self):
        return len(self._users)

    def search(self, query: str = "", order_field: str = "", order_by: int = 0,
               offset: int = 0, limit: int = MAX_LIMIT) -> List[User]:
        attr = ORDER_FIELDS.get(order_field or DEFAULT_ORDER_FIELD)
        if attr is None:
            raise UnknownOrderField(order_field)
        if order_by not in (-1, 0, 1):
            raise UnknownOrderBy(order_by)

        found = [u for u in self._users if not query or query in u.name or query in u.about]
        if order_by:
            found.sort(key=lambda u: getattr(u, attr), reverse=order_by < 0)

        # A client asking for 25 sends limit=26 and never sees the extra
        # record, so next_page stays False at exactly 25.
        limit = min(limit, MAX_LIMIT)
        return found[offset:offset + limit]


def load_store(path: str | None = None) -> UserStore:
    path = path or os.getenv("USER_SEARCH_DATASET")
    if not path:
        return UserStore()
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    return UserStore([User.model_validate(item) for item in data])
