from app.models.user import User, MOCK_USERS

__all__ = [
    "User",
    "MOCK_USERS",
]
