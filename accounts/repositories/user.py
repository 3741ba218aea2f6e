import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import select

from accounts.models import User

logger = logging.getLogger(__name__)

# findOneById 에서 함께 불러오는 관계
USER_RELATIONS = (
    "likes",
    "dislikes",
    "favorites",
    "subscriptions",
    "subscribers",
    "posts",
    "comments",
)


class UserRepository:
    """
    사용자 데이터베이스 접근을 담당하는 Repository 클래스

    세션은 생성자로 주입받으며, 조회/저장/수정/삭제 중 발생한 DB 오류는
    로그를 남기고 롤백한 뒤 호출자에게 그대로 전달합니다.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _columns() -> set:
        return set(User.__table__.columns.keys())

    async def find_one(self, user_id: int, relations: Iterable[str] = ()) -> Optional[User]:
        """
        기본키로 사용자를 조회합니다.

        Args:
            user_id: 사용자 ID
            relations: selectinload 로 함께 불러올 관계 이름

        Returns:
            조회된 사용자 객체 또는 None
        """
        options = [selectinload(getattr(User, name)) for name in relations]
        try:
            result = await self.db.execute(
                select(User).where(User.id == user_id).options(*options)
            )
            user = result.scalars().first()

            if user:
                logger.info(f"사용자 ID 조회 완료: {user_id}")
            else:
                logger.warning(f"사용자 ID를 찾을 수 없음: {user_id}")

            return user

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"사용자 ID 조회 오류 (user_id={user_id}): {e}")
            raise

    async def find_one_by(self, **filters: Any) -> Optional[User]:
        """
        컬럼 값이 모두 일치하는 첫 번째 사용자를 조회합니다 (관계 미포함).
        """
        try:
            statement = select(User)
            for key, value in filters.items():
                statement = statement.where(getattr(User, key) == value)
            result = await self.db.execute(statement)
            return result.scalars().first()

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"사용자 조회 오류 ({filters}): {e}")
            raise

    async def find(self, where: Optional[Mapping[str, Any]] = None, limit: Optional[int] = None) -> List[User]:
        """
        조건에 맞는 사용자 목록을 조회합니다.

        where 의 값이 None 인 항목은 조건에서 제외됩니다.
        """
        try:
            statement = select(User).order_by(User.id)
            for key, value in (where or {}).items():
                if value is not None:
                    statement = statement.where(getattr(User, key) == value)
            if limit is not None:
                statement = statement.limit(limit)

            result = await self.db.execute(statement)
            users = list(result.scalars().all())

            logger.info(f"사용자 목록 조회 완료: {len(users)}명")
            return users

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"사용자 목록 조회 오류: {e}")
            raise

    async def save(self, user: User) -> User:
        """
        사용자(와 변경된 관계)를 저장합니다. 새 객체면 INSERT 됩니다.
        """
        try:
            self.db.add(user)
            await self.db.commit()

            logger.info(f"사용자 저장 완료: {user.id}")
            return user

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"사용자 저장 오류 (email={user.email}): {e}")
            raise

    async def update(self, user_id: int, values: Dict[str, Any]) -> int:
        """
        사용자 정보를 부분 수정합니다.
        users 컬럼이 아닌 키는 무시합니다.

        Returns:
            수정된 행 수
        """
        columns = self._columns()
        unknown = [key for key in values if key not in columns]
        if unknown:
            logger.warning(f"알 수 없는 필드 무시 (user_id={user_id}): {unknown}")
        values = {key: value for key, value in values.items() if key in columns and key != "id"}
        if not values:
            return 0

        try:
            result = await self.db.execute(
                update(User).where(User.id == user_id).values(**values)
            )
            await self.db.commit()

            logger.info(f"사용자 정보 수정 완료: {user_id}")
            return result.rowcount

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"사용자 정보 수정 오류 (user_id={user_id}): {e}")
            raise

    async def delete(self, user_id: int) -> int:
        """
        사용자를 삭제합니다. 존재 여부는 확인하지 않습니다.

        Returns:
            삭제된 행 수
        """
        try:
            result = await self.db.execute(delete(User).where(User.id == user_id))
            await self.db.commit()

            logger.info(f"사용자 삭제 (user_id={user_id}, rows={result.rowcount})")
            return result.rowcount

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"사용자 삭제 오류 (user_id={user_id}): {e}")
            raise
