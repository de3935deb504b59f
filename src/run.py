import uvicorn

from websearch_mcp.config import get_settings
from websearch_mcp.logger import LOGGING_CONFIG

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "websearch_mcp.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=LOGGING_CONFIG,
        log_level="info",
    )
