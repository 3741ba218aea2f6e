from .user import USER_RELATIONS, UserRepository

__all__ = ["UserRepository", "USER_RELATIONS"]
