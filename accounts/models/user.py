from enum import Enum
from typing import List, Optional

from sqlmodel import Field, Relationship

from accounts.models.base import BaseModel
from accounts.models.content import Comment, Post
from accounts.models.links import UserDislike, UserFavorite, UserLike, UserSubscription
from accounts.schemas.user import AccountInfo


class UserRole(str, Enum):
    USER = "user"
    ADMIN_LEVEL_ONE = "admin-level-one"


class AccountStatus(str, Enum):
    ACTIVE = "active"
    BANNED = "banned"


class User(BaseModel, table=True):
    """
    사용자 정보를 저장하는 테이블
    - 비밀번호는 bcrypt 해시로 저장
    - likes / dislikes / favorites / subscriptions 는 다른 User 와의 다대다 관계
    - 관계는 지연 로딩이며, 필요한 곳에서 selectinload 로 명시적으로 불러옴
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="사용자 고유 ID",
        sa_column_kwargs={"autoincrement": True}
    )

    email: str = Field(
        max_length=100,
        nullable=False,
        description="이메일 (로그인용)",
        sa_column_kwargs={"unique": True}
    )

    password: str = Field(
        max_length=255,
        nullable=False,
        description="bcrypt로 해시된 비밀번호"
    )

    first_name: str = Field(default="", max_length=50, description="이름")
    last_name: str = Field(default="", max_length=50, description="성")

    role: str = Field(
        default=UserRole.USER.value,
        max_length=20,
        description="권한 (user, admin-level-one)"
    )

    # accountInfo 임베디드 값
    account_status: str = Field(
        default=AccountStatus.ACTIVE.value,
        max_length=20,
        description="계정 상태 (active, banned)"
    )
    account_comment: Optional[str] = Field(
        default=None,
        max_length=500,
        description="차단 사유"
    )

    likes: List["User"] = Relationship(
        link_model=UserLike,
        sa_relationship_kwargs={
            "primaryjoin": "User.id == UserLike.user_id",
            "secondaryjoin": "User.id == UserLike.target_id",
        },
    )
    dislikes: List["User"] = Relationship(
        link_model=UserDislike,
        sa_relationship_kwargs={
            "primaryjoin": "User.id == UserDislike.user_id",
            "secondaryjoin": "User.id == UserDislike.target_id",
        },
    )
    favorites: List["User"] = Relationship(
        link_model=UserFavorite,
        sa_relationship_kwargs={
            "primaryjoin": "User.id == UserFavorite.user_id",
            "secondaryjoin": "User.id == UserFavorite.target_id",
        },
    )
    subscriptions: List["User"] = Relationship(
        back_populates="subscribers",
        link_model=UserSubscription,
        sa_relationship_kwargs={
            "primaryjoin": "User.id == UserSubscription.subscriber_id",
            "secondaryjoin": "User.id == UserSubscription.author_id",
        },
    )
    subscribers: List["User"] = Relationship(
        back_populates="subscriptions",
        link_model=UserSubscription,
        sa_relationship_kwargs={
            "primaryjoin": "User.id == UserSubscription.author_id",
            "secondaryjoin": "User.id == UserSubscription.subscriber_id",
        },
    )

    posts: List[Post] = Relationship(back_populates="author")
    comments: List[Comment] = Relationship(back_populates="author")

    # -------------------- #
    # 헬퍼 메서드
    # -------------------- #

    @property
    def account_info(self) -> AccountInfo:
        return AccountInfo(status=self.account_status, comment=self.account_comment)

    @property
    def is_banned(self) -> bool:
        return self.account_status == AccountStatus.BANNED.value

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
