import os
from dataclasses import dataclass, field
from typing import List, Optional

from .utils import env_flag, normalize_signal_url, parse_recipients, strip_signal_path

SERVICE_NAME = "overseerr-signal-proxy"

# Caminhos da API do signal-cli-rest-api
SIGNAL_SEND_PATH = "/v2/send"
SIGNAL_ABOUT_PATH = "/v1/about"

# Valor usado quando um campo do payload não existe (ou é vazio)
DEFAULT_FIELD_VALUE = "unknown"
DEFAULT_REQUEST_STATUS = "PENDING"

# Prefixos de linha que recebem emoji próprio
REQUESTED_BY_PREFIX = "Requested By:"
REQUEST_STATUS_PREFIX = "Request Status:"
LINE_PREFIX_EMOJIS = {
    REQUESTED_BY_PREFIX: "👤",
    REQUEST_STATUS_PREFIX: "📋",
}

# Emoji por categoria de evento do Overseerr
EVENT_EMOJIS = {
    "pending": "⏳",
    "approved": "✅",
    "available": "🎉",
    "declined": "❌",
    "failed": "⚠️",
    "issue": "🔴",
    "default": "🎬",
}


@dataclass(frozen=True)
class Settings:
    """
    Configuração do proxy, montada uma única vez na inicialização.
    Passada explicitamente para create_app() e para os serviços.
    """
    port: int = 3001
    signal_api_url: Optional[str] = None
    signal_number: Optional[str] = None
    signal_recipients: List[str] = field(default_factory=list)
    debug_mode: bool = False
    image_fetch_timeout_seconds: float = 5.0
    signal_timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            port=int(env.get("PORT", "3001")),
            signal_api_url=env.get("SIGNAL_API_URL"),
            signal_number=env.get("SIGNAL_NUMBER"),
            signal_recipients=parse_recipients(env.get("SIGNAL_RECIPIENTS", "")),
            debug_mode=env_flag(env.get("DEBUG_MODE"), default=False),
            image_fetch_timeout_seconds=float(env.get("IMAGE_FETCH_TIMEOUT_SECONDS", "5")),
            signal_timeout_seconds=float(env.get("SIGNAL_TIMEOUT_SECONDS", "10")),
        )

    @property
    def signal_send_url(self) -> Optional[str]:
        return normalize_signal_url(self.signal_api_url, SIGNAL_SEND_PATH)

    @property
    def signal_base_url(self) -> Optional[str]:
        return strip_signal_path(self.signal_send_url, SIGNAL_SEND_PATH)
