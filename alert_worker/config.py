import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

current_file_path = Path(__file__).resolve()
root_dir = current_file_path.parent.parent
env_path = root_dir / ".env.dev"

if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=True)
else:
    load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a whole number, got {raw!r}")


def _bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class AlertConfig:
    def __init__(
        self,
        channel_id: Optional[str] = None,
        role_id: Optional[str] = None,
        bot_token: Optional[str] = None,
    ) -> None:
        # Notification target
        self.ALERT_CHANNEL_ID = channel_id or os.getenv("ALERT_CHANNEL_ID")
        self.ALERT_ROLE_ID = role_id or os.getenv("ALERT_ROLE_ID")
        self.DISCORD_BOT_TOKEN = bot_token or os.getenv("DISCORD_BOT_TOKEN")
        self.DISCORD_API_BASE = os.getenv("DISCORD_API_BASE", "https://discord.com/api/v10")

        # Thresholds (hours)
        self.ALERT_FIRST_REMINDER = _int_env("ALERT_FIRST_REMINDER", 72)
        self.ALERT_LAST_REMINDER = _int_env("ALERT_LAST_REMINDER", 24)
        self.ALERT_EXPIRY_GRACE = _int_env("ALERT_EXPIRY_GRACE", 36)

        # Scheduler
        self.ALERT_SCHEDULER_DELAY = _int_env("ALERT_SCHEDULER_DELAY", 5)
        self.ALERT_TIMEZONE = os.getenv("ALERT_TIMEZONE", "Europe/Berlin")

        # Compatibility switches for the old evaluation behaviour
        self.ALERT_LEGACY_PREDICATE = _bool_env("ALERT_LEGACY_PREDICATE")
        self.ALERT_SINGLE_NOTIFICATION_PER_PASS = _bool_env("ALERT_SINGLE_NOTIFICATION_PER_PASS")

        if self.ALERT_SCHEDULER_DELAY <= 0:
            raise ValueError("ALERT_SCHEDULER_DELAY must be a positive number of minutes")

    def missing_notification_settings(self) -> list:
        missing = []
        if not self.ALERT_CHANNEL_ID: missing.append("ALERT_CHANNEL_ID")
        if not self.ALERT_ROLE_ID: missing.append("ALERT_ROLE_ID")
        if not self.DISCORD_BOT_TOKEN: missing.append("DISCORD_BOT_TOKEN")
        return missing

config = AlertConfig()
