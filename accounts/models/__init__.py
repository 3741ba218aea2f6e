"""
데이터 모델 모듈

SQLModel 테이블들을 정의합니다.
"""
from accounts.models.content import Comment, Post
from accounts.models.links import UserDislike, UserFavorite, UserLike, UserSubscription
from accounts.models.user import AccountStatus, User, UserRole

__all__ = [
    "User",
    "UserRole",
    "AccountStatus",
    "Post",
    "Comment",
    "UserLike",
    "UserDislike",
    "UserFavorite",
    "UserSubscription",
]
