"""
Ward Trucking integration settings
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


WARD_PICKUP_TEST_URL = "http://208.51.75.23:6082/cgi-bin/map/PICKUPTEST"
WARD_PICKUP_PRODUCTION_URL = "http://208.51.75.23:6082/cgi-bin/map/PICKUP"
WARD_RATE_QUOTE_URL = "http://208.51.75.23:6082/cgi-bin/map/RATEQUOTE"


class WardSettings(BaseSettings):
    """Ward Trucking API configuration settings"""

    # Endpoints
    pickup_test_url: str = Field(default=WARD_PICKUP_TEST_URL)
    pickup_production_url: str = Field(default=WARD_PICKUP_PRODUCTION_URL)
    # Rate quotes have a single endpoint, production_mode does not apply
    rate_quote_url: str = Field(default=WARD_RATE_QUOTE_URL)

    # Test endpoint unless explicitly switched
    production_mode: bool = Field(default=False)

    # Seconds; Ward is sometimes very slow to answer
    timeout: float = Field(default=10.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="WARD_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @property
    def pickup_url(self) -> str:
        """Pickup endpoint for the selected mode"""
        return self.pickup_production_url if self.production_mode else self.pickup_test_url


@lru_cache()
def get_ward_settings() -> WardSettings:
    """Get cached Ward settings instance"""
    return WardSettings()
