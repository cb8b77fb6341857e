"""
Admin authentication service layer
"""

from typing import Dict, Any, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from storefront.models import AdminUser, utcnow
from storefront.core.security import SecurityUtils
from storefront.core.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)

class AdminAuthService:
    """Credential check and token issuance for back-office users"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_username(self, username: str) -> Optional[AdminUser]:
        result = await self.db.execute(
            select(AdminUser).where(AdminUser.username == username)
        )
        return result.scalar_one_or_none()

    async def authenticate(self, username: str, password: str) -> AdminUser:
        """
        Verify credentials and stamp last_login

        Raises:
            UnauthorizedException: unknown user, inactive user or wrong password
        """
        user = await self.get_by_username(username)
        if not user or not user.is_active or not SecurityUtils.verify_password(password, user.password_hash):
            logger.warning(f"Failed admin login for '{username}'")
            raise UnauthorizedException("Invalid credentials", error_code="INVALID_CREDENTIALS")

        user.last_login = utcnow()
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def login(self, username: str, password: str) -> Dict[str, Any]:
        user = await self.authenticate(username, password)
        access_token = SecurityUtils.create_access_token({
            "sub": user.username,
            "uid": user.id,
            "role": user.role,
        })
        logger.info(f"Admin '{user.username}' logged in")
        return {
            "message": "Login successful",
            "user": user,
            "access_token": access_token,
            "token_type": "bearer",
        }
