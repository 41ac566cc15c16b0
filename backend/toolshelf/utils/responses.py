from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(status_code: int, data: Any = None, message: str = "Success") -> dict:
    """Success envelope: ``{statusCode, data, message, success}``."""
    return {
        "statusCode": status_code,
        "data": jsonable_encoder(data if data is not None else {}),
        "message": message,
        "success": status_code < 400,
    }


def error_envelope(status_code: int, message: str) -> dict:
    return {"statusCode": status_code, "message": message, "success": False}


def api_response(status_code: int, data: Any = None, message: str = "Success") -> JSONResponse:
    #HTTP status always mirrors the statusCode inside the body
    return JSONResponse(status_code=status_code, content=envelope(status_code, data, message))


def api_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_envelope(status_code, message))
