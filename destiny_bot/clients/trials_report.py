from typing import Optional
from urllib.parse import quote

from destiny_bot.config import Config
from destiny_bot.constants import ProfileConstants


class TrialsReportClient:
    """Builds links to player pages on Destiny Trials Report."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or Config.TRIALS_REPORT_URL).rstrip('/')

    def get_profile_url(self, name: str, on_xbox: bool) -> str:
        # Always the PlayStation path; the site forwards Xbox players itself
        return f"{self.base_url}/{ProfileConstants.DEFAULT_PLATFORM_PATH}/{quote(name)}"
