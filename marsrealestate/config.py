from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    MARS_API_URL: str = "https://android-kotlin-fun-mars-server.appspot.com/"
    REQUEST_TIMEOUT: float = 30.0
    DEFAULT_FILTER: str = "all"

    class Config:
        env_file = ".env"

settings = Settings()
