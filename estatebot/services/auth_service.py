import logging
import uuid
from datetime import datetime, timezone

from fastapi import HTTPException

from ..core.security import hash_password, verify_password, issue_token
from ..data.base import UserRecord, UserStore

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

class AuthService:
    def __init__(self, store: UserStore):
        self.store = store

    def signup(self, name: str | None, email: str | None, password: str | None) -> tuple[UserRecord, str]:
        if not name or not email or not password:
            raise HTTPException(status_code=400, detail="All fields are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise HTTPException(
                status_code=400,
                detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        if self.store.find_by_email(email):
            raise HTTPException(status_code=400, detail="User already exists with this email")

        user = UserRecord(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            password=hash_password(password),
            role="user",
            created_at=datetime.now(timezone.utc),
        )
        if not self.store.add(user):
            raise HTTPException(status_code=500, detail="Server error. Please try again later.")
        logger.info("Registered user %s", user.id)
        return user, issue_token(user.id, user.email, user.role)

    def login(self, email: str | None, password: str | None) -> tuple[UserRecord, str]:
        if not email or not password:
            raise HTTPException(status_code=400, detail="Email and password are required")
        user = self.store.find_by_email(email)
        if user is None or not verify_password(password, user.password):
            raise HTTPException(status_code=400, detail="Invalid credentials")
        return user, issue_token(user.id, user.email, user.role)

    def get_user(self, user_id: str) -> UserRecord:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")
        return user
