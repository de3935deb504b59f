from fastapi.responses import PlainTextResponse

STATUS_MESSAGE = "{name} is running. Use the /mcp endpoint to interact."
NOT_FOUND_MESSAGE = "Not found. Use the /mcp endpoint."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def ok(name: str) -> PlainTextResponse:
    return PlainTextResponse(STATUS_MESSAGE.format(name=name), status_code=200)


def not_found() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)


def error(message: str = "error", status_code: int = 400, headers: dict | None = None) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code, headers=headers)

def unexpect_error() -> PlainTextResponse:
    return error(UNEXPECTED_ERROR_MESSAGE, status_code=500)
