from dataclasses import dataclass
import os

from dotenv import load_dotenv

CREDENTIAL_VARS = (
    "X_API_KEY",
    "X_API_KEY_SECRET",
    "X_ACCESS_TOKEN",
    "X_ACCESS_TOKEN_SECRET",
)


@dataclass
class Config:
    api_key: str
    api_key_secret: str
    access_token: str
    access_token_secret: str
    server_name: str
    log_level: str

    def missing_credentials(self) -> list[str]:
        """Return the names of credential variables that are not set."""
        values = (
            self.api_key,
            self.api_key_secret,
            self.access_token,
            self.access_token_secret,
        )
        return [name for name, value in zip(CREDENTIAL_VARS, values) if not value]


def load_config() -> Config:
    """Load configuration from environment variables with defaults."""
    load_dotenv()
    return Config(
        api_key=os.getenv("X_API_KEY", ""),
        api_key_secret=os.getenv("X_API_KEY_SECRET", ""),
        access_token=os.getenv("X_ACCESS_TOKEN", ""),
        access_token_secret=os.getenv("X_ACCESS_TOKEN_SECRET", ""),
        server_name=os.getenv("X_MCP_SERVER_NAME", "x-mcp-server"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
