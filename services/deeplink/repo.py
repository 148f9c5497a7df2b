"""Data access for saved templates.

Templates are stored on the partner config API:
  PATCH {DEEPLINK_CONFIG_API_URL}/channel-partner/{partner_id}/configV2
with the camelCase template JSON as the body.
"""

from typing import Any, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from lib.deeplink.errors import TemplateSaveError
from lib.deeplink.models import Template
from services.deeplink.config import StoreSettings, load_settings


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return "Failed to save template"
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return f"HTTP error! status: {response.status_code}"


async def store_template(
    template: Template,
    settings: Optional[StoreSettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """Send a template to the partner config API. Returns the decoded response.

    Raises TemplateSaveError on bad settings, transport failure or a non-2xx response.
    Safe to retry with the same template.
    """
    if settings is None:
        try:
            settings = load_settings()
        except ValidationError as e:
            raise TemplateSaveError(f"Invalid template store settings: {e}") from e
    if not settings.channel_partner_id:
        raise TemplateSaveError("DEEPLINK_CHANNEL_PARTNER_ID is not configured")

    url = settings.config_url
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.timeout) as own_client:
                response = await own_client.patch(url, json=template.to_payload())
        else:
            response = await client.patch(url, json=template.to_payload(), timeout=settings.timeout)
    except httpx.HTTPError as e:
        raise TemplateSaveError(f"Failed to save template: {e}") from e

    if not response.is_success:
        raise TemplateSaveError(_error_message(response), status_code=response.status_code)

    try:
        return response.json()
    except ValueError:
        logger.warning(f"Template store returned non-JSON body ({response.status_code})")
        return {}
