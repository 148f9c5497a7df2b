"""Template store configuration, read from the environment (.env supported)."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class StoreSettings(BaseModel):
    """Where saved templates are sent."""

    api_url: str = Field(default="http://localhost:3000", description="Partner config API base URL")
    channel_partner_id: str = Field(default="", description="Channel partner whose config is patched")
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")

    @property
    def config_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/channel-partner/{self.channel_partner_id}/configV2"


def load_settings() -> StoreSettings:
    """Raises pydantic.ValidationError when a variable does not parse (e.g. a non-numeric timeout)."""
    return StoreSettings(
        api_url=os.getenv("DEEPLINK_CONFIG_API_URL", "http://localhost:3000"),
        channel_partner_id=os.getenv("DEEPLINK_CHANNEL_PARTNER_ID", ""),
        timeout=os.getenv("DEEPLINK_SAVE_TIMEOUT", "10.0"),
    )
