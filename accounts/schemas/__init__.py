"""
스키마 모듈

서비스 입력 DTO들을 정의합니다.
"""

from .user import AccountInfo, UserCreateRequest, UserUpdateRequest

__all__ = [
    "AccountInfo",
    "UserCreateRequest",
    "UserUpdateRequest",
]
