"""테스트 데이터 팩토리"""
from datetime import date

from app.models.member import Member
from app.models.post import Post

MEMBER_EMAIL = "example@friendy.com"
MEMBER_NICKNAME = "bokSungKim"
MEMBER_PASSWORD = "password123!"
MEMBER_BIRTH_DATE = date(2002, 8, 13)

TEMP_IMAGE_URL = "https://test-bucket.s3.us-east-1.amazonaws.com/temp/a1b2c3.jpg"


def member_fixture(**overrides) -> Member:
    """저장 전 상태의 테스트 회원 (비밀번호는 해시되어 있음)"""
    values = {
        "email": MEMBER_EMAIL,
        "nickname": MEMBER_NICKNAME,
        "password": Member.hash_password(MEMBER_PASSWORD),
        "birth_date": MEMBER_BIRTH_DATE,
    }
    values.update(overrides)
    return Member(**values)


def post_fixture(member: Member, content: str = "오늘 날씨 좋다", image_urls=None) -> Post:
    return Post(content=content, image_urls=image_urls or [], member_id=member.id)


def signup_body(**overrides) -> dict:
    body = {
        "email": MEMBER_EMAIL,
        "nickname": MEMBER_NICKNAME,
        "password": MEMBER_PASSWORD,
        "birthDate": "2002-08-13",
    }
    body.update(overrides)
    return body


def without(body: dict, key: str) -> dict:
    return {k: v for k, v in body.items() if k != key}
