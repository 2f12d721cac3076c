import logging
from typing import Mapping, Optional, Tuple
import requests
from .config import config
# Setup logger
logger = logging.getLogger(__name__)

EMBED_COLOR = 0xFFC800  # orange

def _api_url(channel_id: str) -> str:
    return f"{config.DISCORD_API_BASE}/channels/{channel_id}/messages"

def build_alert_embed(alert) -> dict:
    """
    Display fields of one alert, as a Discord embed.
    Used both for reminders and for the info command.
    """
    return {
        "title": "Reminder",
        "color": EMBED_COLOR,
        "fields": [
            {"name": "Name", "value": alert.name, "inline": False},
            {"name": "Date", "value": alert.date, "inline": False},
            {"name": "Description", "value": alert.description or "-", "inline": False},
        ],
        "footer": {"text": f"Added by {alert.created_by or 'unknown'}"},
    }

def role_mention(role_id: Optional[str]) -> str:
    # Spoiler-wrapped so the ping does not clutter the channel
    return f"||<@&{role_id}>||" if role_id else ""

def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300

def send_channel_message(
    channel_id: str,
    content: str,
    embeds: Optional[list] = None
) -> Tuple[Mapping, int]:
    """
    Posts a message to a Discord channel.

    Arguments:
        channel_id (str): Target channel.
        content (str): Plain text part of the message.
        embeds (list, optional): Embed objects to attach.
    """
    # Validation
    if not (config.DISCORD_BOT_TOKEN and channel_id):
        logger.error("Missing Discord bot token or channel id")
        return {"status": "error", "message": "Missing configuration"}, 500

    headers = {
        "Content-type": "application/json",
        "Authorization": f"Bot {config.DISCORD_BOT_TOKEN}",
    }
    payload = {"content": content, "embeds": embeds or []}

    try:
        resp = requests.post(
            _api_url(channel_id),
            json=payload,
            headers=headers,
            timeout=15
        )
        resp.raise_for_status()
        return resp.json(), resp.status_code

    except requests.Timeout:
        logger.error("Discord request timed out")
        return {"status": "error", "message": "Request timed out"}, 408

    except requests.RequestException as e:
        logger.error(f"Discord send error: {e}")

        if e.response is not None:
            try:
                return e.response.json(), e.response.status_code
            except ValueError:
                return {"status": "error", "message": e.response.text}, e.response.status_code
        return {"status": "error", "message": "Failed to send message"}, 500

def send_alert_notification(destination: str, alert) -> Tuple[Mapping, int]:
    """
    Sends the reminder for an alert to the destination channel, pinging the alert role.
    """
    return send_channel_message(
        destination,
        role_mention(config.ALERT_ROLE_ID),
        [build_alert_embed(alert)]
    )
