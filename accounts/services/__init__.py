"""
서비스 계층 모듈

비즈니스 로직을 담당합니다.
Repository와 Controller 사이의 중간 계층입니다.
"""

from .user import UserService

__all__ = [
    "UserService",
]
