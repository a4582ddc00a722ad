import uvicorn

from ekrili.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "ekrili.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1,  # storage lives in process memory
    )
