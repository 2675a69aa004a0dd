# src/services/uploads.py
import base64
from typing import Optional

from fastapi import UploadFile

from src.config.settings import settings
from src.services.errors import ValidationError


async def to_data_uri(file: Optional[UploadFile]) -> Optional[str]:
    """
    업로드 파일을 JSON에 그대로 넣을 수 있는 data URI로 변환
    - 파일이 없으면 None
    - settings.max_image_bytes 초과 시 ValidationError
    """
    if file is None or not file.filename:
        return None

    raw = await file.read()
    if not raw:
        return None
    if len(raw) > settings.max_image_bytes:
        raise ValidationError("이미지 용량이 너무 큽니다.")

    mime = file.content_type or "application/octet-stream"
    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{mime};base64,{encoded}"
