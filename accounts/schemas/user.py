from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class AccountInfo(BaseModel):
    """
    계정 상태 정보 (users.account_status / users.account_comment)
    """
    model_config = ConfigDict(from_attributes=True)

    status: str = Field("active", description="계정 상태 (active, banned)")
    comment: Optional[str] = Field(None, description="차단 사유")


class UserCreateRequest(BaseModel):
    """
    사용자 생성 요청 스키마
    """
    email: EmailStr = Field(..., description="이메일 주소")
    password: str = Field(..., min_length=1, max_length=100, description="비밀번호 (평문)")
    first_name: str = Field("", max_length=50, description="이름")
    last_name: str = Field("", max_length=50, description="성")
    role: str = Field("user", max_length=20, description="권한")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "hong@example.com",
                "password": "securepassword123",
                "first_name": "Gildong",
                "last_name": "Hong",
            }
        }
    )


class UserUpdateRequest(BaseModel):
    """
    사용자 정보 수정 요청 스키마 (부분 수정, 설정된 필드만 반영)
    """
    email: Optional[EmailStr] = Field(None, description="이메일 주소")
    password: Optional[str] = Field(None, max_length=255, description="비밀번호 (평문 또는 기존 해시)")
    first_name: Optional[str] = Field(None, max_length=50, description="이름")
    last_name: Optional[str] = Field(None, max_length=50, description="성")
    role: Optional[str] = Field(None, max_length=20, description="권한")
    account_status: Optional[str] = Field(None, description="계정 상태")
    account_comment: Optional[str] = Field(None, description="차단 사유")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "Cheolsu",
                "last_name": "Kim",
            }
        }
    )
