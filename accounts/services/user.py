import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.core.config import settings
from accounts.core.exceptions import ConflictException, NotFoundException
from accounts.models import AccountStatus, User, UserRole
from accounts.repositories.user import USER_RELATIONS, UserRepository
from accounts.schemas import UserCreateRequest, UserUpdateRequest
from accounts.services.protocols import UserStore
from accounts.utils.security import gen_salt, hash_password

logger = logging.getLogger(__name__)


class UserService:
    """
    사용자 조회/가입/수정/차단/구독 비즈니스 로직을 담당하는 Service 클래스

    legacy_compat=True 이면 기존 계약을 그대로 재현합니다:
    - create_user: 중복 이메일일 때 ConflictException 을 raise 하지 않고 반환
    - user_to_admin: 권한을 변경하지 않고 저장만 함
    """

    def __init__(
        self,
        db: AsyncSession,
        user_repository: Optional[UserStore] = None,
        legacy_compat: Optional[bool] = None,
        bcrypt_rounds: Optional[int] = None,
    ):
        self.db = db
        self.user_repository = user_repository or UserRepository(db)
        self.legacy_compat = settings.LEGACY_USER_SERVICE if legacy_compat is None else legacy_compat
        self.bcrypt_rounds = bcrypt_rounds or settings.BCRYPT_ROUNDS

    async def find_one_by_id(self, id: Union[int, str]) -> Optional[User]:
        """
        ID로 사용자를 조회합니다 (모든 관계 포함). 없으면 None
        """
        return await self.user_repository.find_one(int(id), relations=USER_RELATIONS)

    async def find_one_by_email(self, email: str) -> Optional[User]:
        """
        이메일로 사용자를 조회합니다 (관계 미포함). 없으면 None
        """
        return await self.user_repository.find_one_by(email=email)

    async def find_all(self, search: Optional[str] = None, limit: Optional[int] = None) -> List[User]:
        """
        사용자 목록을 조회합니다.

        search 는 first_name 과 last_name 양쪽에 각각 적용되어 AND 로 묶입니다.
        (이름과 성이 모두 search 와 같은 사용자만 반환)
        """
        return await self.user_repository.find(
            where={
                "first_name": search or None,
                "last_name": search or None,
            },
            limit=limit,
        )

    async def create_user(self, dto: Union[UserCreateRequest, Mapping[str, Any]]) -> Union[User, ConflictException]:
        """
        새로운 사용자를 생성합니다.

        Returns:
            생성된 사용자. legacy_compat 모드에서 이메일이 중복이면 ConflictException 객체

        Raises:
            ConflictException: 이메일이 중복인 경우 (legacy_compat 가 아닐 때)
        """
        data = self._as_dict(dto)

        existing = await self.find_one_by_email(data["email"])
        if existing:
            logger.warning(f"이메일 중복 생성 시도: {data['email']}")
            conflict = ConflictException("Email or username is already in use")
            if self.legacy_compat:
                return conflict
            raise conflict

        data["password"] = hash_password(data["password"], gen_salt(self.bcrypt_rounds))
        user = User(
            **data,
            likes=[],
            dislikes=[],
            favorites=[],
            subscriptions=[],
            subscribers=[],
        )
        user = await self.user_repository.save(user)

        logger.info(f"사용자 생성 서비스 완료: {user.email}")
        return user

    async def update_user(self, id: int, dto: Union[UserUpdateRequest, Mapping[str, Any]]) -> int:
        """
        사용자 정보를 부분 수정합니다.
        전달된 password 가 저장된 값과 다르면 새 salt 로 다시 해시합니다.

        Returns:
            수정된 행 수

        Raises:
            NotFoundException: 사용자가 없는 경우
        """
        user = await self.find_one_by_id(id)
        if not user:
            raise NotFoundException("User not found")

        data = self._as_dict(dto)
        if data.get("password") is not None and data["password"] != user.password:
            data["password"] = hash_password(data["password"], gen_salt(self.bcrypt_rounds))

        return await self.user_repository.update(user.id, data)

    async def delete_user(self, id: int) -> int:
        """
        사용자를 삭제합니다. 존재 여부는 확인하지 않습니다.
        """
        return await self.user_repository.delete(id)

    async def toggle_subscription(self, user_id: int, author_id: int) -> None:
        """
        user 와 author 사이의 구독을 토글합니다.
        구독 중이면 양방향 구독을 모두 해제하고, 아니면 양방향으로 추가합니다.

        Raises:
            NotFoundException: user 또는 author 가 없는 경우
        """
        user = await self.find_one_by_id(user_id)
        if not user:
            raise NotFoundException("User not found")

        author = await self.find_one_by_id(author_id)
        if not author:
            raise NotFoundException("Author not found")

        if any(subscription.id == author.id for subscription in user.subscriptions):
            user.subscriptions = [s for s in user.subscriptions if s.id != author.id]
            author.subscriptions = [s for s in author.subscriptions if s.id != user.id]
            logger.info(f"구독 해제: {user.id} <-> {author.id}")
        else:
            user.subscriptions.append(author)
            # 자기 자신 구독이면 위에서 이미 추가됨
            if not any(s.id == user.id for s in author.subscriptions):
                author.subscriptions.append(user)
            logger.info(f"구독 추가: {user.id} <-> {author.id}")

        await self.user_repository.save(user)
        await self.user_repository.save(author)

    async def toggle_banned(self, user_id: int, comment: Optional[str] = None) -> User:
        """
        계정 상태를 active <-> banned 로 전환합니다.
        차단 시 comment 를 저장하고, 해제 시 기존 comment 는 그대로 둡니다.
        """
        user = await self.find_one_by_id(user_id)
        if not user:
            raise NotFoundException("User not found")

        if user.account_status == AccountStatus.BANNED.value:
            user.account_status = AccountStatus.ACTIVE.value
        else:
            user.account_status = AccountStatus.BANNED.value
            user.account_comment = comment

        logger.info(f"계정 상태 변경: {user.id} -> {user.account_status}")
        return await self.user_repository.save(user)

    async def user_to_admin(self, user_id: int) -> User:
        """
        사용자 권한을 admin-level-one 으로 올립니다.
        """
        user = await self.find_one_by_id(user_id)
        if not user:
            raise NotFoundException("User not found")

        if self.legacy_compat:
            logger.warning(f"legacy 모드: 권한 변경 없이 저장 (user_id={user.id}, role={user.role})")
        else:
            user.role = UserRole.ADMIN_LEVEL_ONE.value

        return await self.user_repository.save(user)

    @staticmethod
    def _as_dict(dto: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, Any]:
        if isinstance(dto, BaseModel):
            return dto.model_dump(exclude_unset=True)
        return dict(dto)
