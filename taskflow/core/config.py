from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./taskflow.db")
    PUBLIC_DIR = getenv("PUBLIC_DIR", "./public")  # assets du front + index.html
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    STATS_WORKERS = int(getenv("STATS_WORKERS", "9"))  # un comptage par thread

settings = Settings()
