import json
from typing import Any, Optional
from pydantic import BaseModel

class ResponseModel(BaseModel):
    """Envelope printed by console commands."""
    code: int = 200
    message: str = "success"
    data: Optional[Any] = None

    @staticmethod
    def success(data: Any = None):
        return {"code": 200, "message": "success", "data": data}

    @staticmethod
    def fail(code: int = 400, message: str = "error", data: Any = None):
        return {"code": code, "message": message, "data": data}

    @staticmethod
    def is_success(payload: dict) -> bool:
        return payload.get("code") == 200

    @staticmethod
    def render(payload: dict) -> str:
        """Serialize an envelope; pydantic models inside data are dumped to dicts."""
        def _default(value: Any):
            if isinstance(value, BaseModel):
                return value.model_dump()
            return str(value)
        return json.dumps(payload, default=_default, ensure_ascii=False)
