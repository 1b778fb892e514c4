from dataclasses import dataclass

from app.core.permissions import Role


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: Role


MOCK_USERS: tuple[User, ...] = (
    User(id="1", name="Admin User", email="admin@taxpadi.com", role=Role.ADMIN),
    User(id="2", name="Jane Doe (Employee)", email="employee@taxpadi.com", role=Role.EMPLOYEE),
    User(id="3", name="John Smith (Accountant)", email="accountant@taxpadi.com", role=Role.ACCOUNTANT),
)
