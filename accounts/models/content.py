from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import Text
from sqlmodel import Field, Relationship

from accounts.models.base import BaseModel

if TYPE_CHECKING:
    from accounts.models.user import User


class Post(BaseModel, table=True):
    """
    사용자가 작성한 게시글
    """

    __tablename__ = "posts"

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        sa_column_kwargs={"autoincrement": True},
    )

    title: str = Field(max_length=200, nullable=False, description="제목")
    body: str = Field(default="", sa_type=Text, description="본문")

    author_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    author: Optional["User"] = Relationship(back_populates="posts")
    comments: List["Comment"] = Relationship(back_populates="post")


class Comment(BaseModel, table=True):
    """
    게시글에 달린 댓글
    """

    __tablename__ = "comments"

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        sa_column_kwargs={"autoincrement": True},
    )

    text: str = Field(sa_type=Text, nullable=False)

    author_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    post_id: int = Field(foreign_key="posts.id", nullable=False, index=True)

    author: Optional["User"] = Relationship(back_populates="comments")
    post: Optional[Post] = Relationship(back_populates="comments")
