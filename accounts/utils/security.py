from typing import Optional

import bcrypt

from accounts.core.config import settings


def _truncate_password(password: str) -> bytes:
    """
    bcrypt는 72바이트까지만 처리하므로, 초과하면 UTF-8 문자 경계를 고려하여 자름
    Returns bytes for bcrypt
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= 72:
        return password_bytes

    # UTF-8 문자가 중간에 잘리지 않도록 문자 단위로 처리
    truncated = password
    while len(truncated.encode("utf-8")) > 72:
        truncated = truncated[:-1]
    return truncated.encode("utf-8")


def gen_salt(rounds: Optional[int] = None) -> bytes:
    """
    bcrypt salt를 생성합니다. rounds 기본값은 settings.BCRYPT_ROUNDS (10)
    """
    return bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)


def hash_password(password: str, salt: Optional[bytes] = None) -> str:
    """
    비밀번호를 bcrypt로 해시화합니다.
    """
    password_bytes = _truncate_password(password)
    hashed = bcrypt.hashpw(password_bytes, salt or gen_salt())
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """
    비밀번호를 검증합니다.
    """
    plain_bytes = _truncate_password(plain)
    hashed_bytes = hashed.encode("utf-8")
    return bcrypt.checkpw(plain_bytes, hashed_bytes)
