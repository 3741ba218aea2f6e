import bcrypt

from accounts.utils.security import gen_salt, hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("secret", gen_salt(4))
    assert hashed != "secret"
    assert verify_password("secret", hashed)
    assert not verify_password("Secret", hashed)


def test_gen_salt_uses_cost_factor():
    assert gen_salt(10).startswith(b"$2b$10$")


def test_hash_without_salt_uses_settings_rounds():
    hashed = hash_password("secret")
    assert bcrypt.checkpw(b"secret", hashed.encode("utf-8"))


def test_long_password_truncated_on_character_boundary():
    # 3바이트 문자 30개 = 90바이트 -> 72바이트(24자)까지만 사용
    password = "가" * 30
    hashed = hash_password(password, gen_salt(4))
    assert verify_password("가" * 24, hashed)
    assert verify_password(password + "뒤", hashed)
