from app.data.models import User
from app.data.store import InMemoryStore


class UserRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_user(self, user_id: str) -> User | None:
        return self.store.users.get(user_id)

    def get_or_create_user(self, user_id: str) -> User:
        user = self.store.users.get(user_id)
        if user is None:
            user = User(id=user_id)
            self.store.users[user_id] = user
        return user
