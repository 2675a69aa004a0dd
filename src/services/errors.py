# src/services/errors.py
# 서비스 계층 예외. 라우터에서 status_code로 HTTPException 변환


class DiaryServiceError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateIdentity(DiaryServiceError):
    status_code = 400


class UnknownIdentity(DiaryServiceError):
    status_code = 404


class InvalidCredential(DiaryServiceError):
    status_code = 401


class ValidationError(DiaryServiceError):
    status_code = 400


class NotFound(DiaryServiceError):
    status_code = 404


class PermissionDenied(DiaryServiceError):
    status_code = 403


class StorageConstraintViolation(DiaryServiceError):
    status_code = 409
