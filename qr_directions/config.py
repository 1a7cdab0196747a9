"""Application configuration via Pydantic Settings.

Every default reproduces the public services the app was built against, so
nothing needs to be set for a working setup. Each field is mapped to an
explicit env variable name to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geocoder
    geocoder_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        validation_alias="GEOCODER_URL",
    )
    geocoder_user_agent: str = Field(
        default="QRDirectionsGenerator",
        validation_alias="GEOCODER_USER_AGENT",
    )
    geocoder_timeout: float = Field(default=10.0, validation_alias="GEOCODER_TIMEOUT")

    # Map deep links
    maps_directions_url: str = Field(
        default="https://www.google.com/maps/dir/",
        validation_alias="MAPS_DIRECTIONS_URL",
    )

    # QR rendering
    qr_api_url: str = Field(
        default="https://api.qrserver.com/v1/create-qr-code/",
        validation_alias="QR_API_URL",
    )
    qr_size: int = Field(default=200, gt=0, validation_alias="QR_SIZE")
    qr_fetch_timeout: float = Field(default=10.0, validation_alias="QR_FETCH_TIMEOUT")
    qr_download_filename: str = Field(
        default="directions-qr-code.png",
        validation_alias="QR_DOWNLOAD_FILENAME",
    )

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
