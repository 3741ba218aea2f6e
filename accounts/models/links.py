"""
users 테이블의 자기참조 다대다 관계용 연결 테이블
"""
from sqlmodel import Field, SQLModel


class UserLike(SQLModel, table=True):
    __tablename__ = "user_likes"

    user_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
    target_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")


class UserDislike(SQLModel, table=True):
    __tablename__ = "user_dislikes"

    user_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
    target_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")


class UserFavorite(SQLModel, table=True):
    __tablename__ = "user_favorites"

    user_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
    target_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")


class UserSubscription(SQLModel, table=True):
    """
    subscriber_id 사용자가 author_id 사용자를 구독
    - User.subscriptions / User.subscribers 가 이 테이블의 양 방향
    """
    __tablename__ = "user_subscriptions"

    subscriber_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
    author_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
