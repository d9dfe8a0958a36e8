import uvicorn

from user_service.runtime.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "user_service.adapters.http.fastapi.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
