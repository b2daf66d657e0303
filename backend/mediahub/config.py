from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Which backend handles uploads — only "local" ships today
    UPLOAD_PROVIDER: str = "local"

    # Local disk storage. Files land in <UPLOAD_BASE_PATH>/<LOCAL_UPLOAD_PATH>/<folder>/
    # and are served statically from /<LOCAL_UPLOAD_PATH>/.
    LOCAL_UPLOAD_PATH: str = "uploads"
    UPLOAD_BASE_PATH: str = ""  # empty = current working directory

    # Public links are built as <STORAGE_SERVER_URL>/<LOCAL_UPLOAD_PATH>/<publicId>.
    # Leave empty to fall back to http://localhost:<STORAGE_PORT>.
    STORAGE_SERVER_URL: str = ""
    STORAGE_PORT: int = 5001

    # Image normalisation
    MAX_IMAGE_WIDTH: int = 1280
    IMAGE_QUALITY: int = 80

    model_config = {"env_file": ".env"}

    @property
    def storage_server_url(self) -> str:
        return (self.STORAGE_SERVER_URL or f"http://localhost:{self.STORAGE_PORT}").rstrip("/")


settings = Settings()
