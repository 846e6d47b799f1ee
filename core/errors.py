"""
도메인 예외 정의

서비스/코어 계층에서 발생시키고 Web 경계(exception handler)에서
{"error": <message>} 응답으로 변환.

- ValidationError: 잘못된 입력 (400)
- AuthenticationError: 인증 실패 (401)
- NotFoundError: 리소스 없음 / 소유자 불일치 / 삭제됨 (404)
- TransferFailedError: 이체 원자적 쓰기 실패 (500)
"""


class TrackerError(Exception):
    """도메인 예외 기본 클래스"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """입력 검증 실패 (스토어 접근 전 거부)"""

    status_code = 400


class AuthenticationError(TrackerError):
    """인증 실패"""

    status_code = 401


class NotFoundError(TrackerError):
    """리소스 조회 실패"""

    status_code = 404


class TransferFailedError(TrackerError):
    """이체 저장 실패 (부분 저장 없음)"""

    status_code = 500
