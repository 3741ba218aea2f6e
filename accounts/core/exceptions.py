"""
서비스 계층에서 사용하는 예외 정의

FastAPI HTTPException을 상속하므로 상위 컨트롤러에서 별도 핸들러 없이
그대로 HTTP 응답으로 변환됩니다.
"""
from fastapi import HTTPException, status


class NotFoundException(HTTPException):
    """요청한 사용자(또는 작성자)가 존재하지 않을 때"""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictException(HTTPException):
    """이미 사용 중인 이메일로 가입을 시도할 때"""

    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
