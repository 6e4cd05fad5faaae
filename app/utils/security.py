import bcrypt


def _truncate_password(password: str) -> bytes:
    """
    bcrypt는 72바이트까지만 처리하므로, 초과하면 UTF-8 문자 경계를 고려하여 자름
    Returns bytes for bcrypt
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= 72:
        return password_bytes

    truncated = password
    while len(truncated.encode("utf-8")) > 72:
        truncated = truncated[:-1]
    return truncated.encode("utf-8")


def get_password_hash(password: str) -> str:
    """
    비밀번호를 bcrypt로 해시화합니다.
    """
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(_truncate_password(password), salt)
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """
    비밀번호를 검증합니다.
    """
    try:
        return bcrypt.checkpw(_truncate_password(plain), hashed.encode("utf-8"))
    except ValueError:
        # 저장된 값이 bcrypt 해시 형식이 아닌 경우
        return False
