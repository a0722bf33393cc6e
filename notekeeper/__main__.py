import uvicorn

from notekeeper.config import settings


def main():
    uvicorn.run("notekeeper.main:app", host="0.0.0.0", port=8000, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
