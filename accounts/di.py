from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.database import get_session
from accounts.services.user import UserService


# 의존성 주입
def get_user_service(db: AsyncSession = Depends(get_session)) -> UserService:
    """
    사용자 서비스 의존성 주입 (FastAPI Depends용)
    """
    return UserService(db)
