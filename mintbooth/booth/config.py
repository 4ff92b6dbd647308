"""
Booth configuration

The booth is configured via a TOML config file, e.g.

[server]
host = "127.0.0.1"
port = 3001
frontend_url = "http://localhost:5173"
production = false

[logging]
level = "INFO"

[database]
url = "sqlite:///mintbooth.db"

[algod]
token = ""
url = "https://testnet-api.algonode.cloud"

[indexer]
token = ""
url = "https://testnet-idx.algonode.cloud"

[sponsor]
mnemonic = "<25 word mnemonic>"

[admin]
username = "admin"
password = "<password>"
jwt_secret = "<secret>"
"""
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mintbooth.algorand.model import Mnemonic
from mintbooth.booth.auth import AdminCredentials

REDACTED = "********"


class ConfigError(Exception):
    """
    Config is missing a required setting, or a setting is invalid
    """


@dataclass(slots=True, frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 3001
    # CORS allowed origin
    frontend_url: str = "http://localhost:5173"
    # when True, the admin cookie is marked secure
    production: bool = False


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """
    Algod or indexer connection settings
    """

    url: str
    token: str = field(default="", repr=False)


@dataclass(slots=True, frozen=True)
class BoothConfig:
    """
    Booth config

    - [database], [algod], [indexer], and [sponsor] are required
    - [server], [logging], and [admin] are optional

    Admin login is rejected at request time when the [admin] settings are missing.
    """

    database_url: str
    algod: ClientConfig
    indexer: ClientConfig
    sponsor_mnemonic: Mnemonic = field(repr=False)
    server: ServerConfig = field(default_factory=ServerConfig)
    log_level: str = "INFO"
    admin: AdminCredentials = field(default_factory=AdminCredentials)

    @classmethod
    def from_config_file(cls, file: Path) -> "BoothConfig":
        """
        :exception ConfigError: if the file is not valid TOML or the config is invalid
        """
        try:
            with open(file, "rb") as config_file:
                config = tomllib.load(config_file)
        except tomllib.TOMLDecodeError as err:
            raise ConfigError(f"invalid TOML config file: {file} : {err}") from err
        return cls.from_dict(config)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "BoothConfig":
        """
        :exception ConfigError: if a required setting is missing or invalid
        """
        word_list = _required(config, "sponsor", "mnemonic")
        try:
            sponsor_mnemonic = Mnemonic.from_word_list(str(word_list))
            # verifies the words and the checksum
            sponsor_mnemonic.to_private_key()
        except Exception as err:  # pylint: disable=broad-exception-caught
            raise ConfigError(f"[sponsor] mnemonic is invalid: {err}") from err

        server = config.get("server", {})
        server_defaults = ServerConfig()
        admin = config.get("admin", {})
        return cls(
            database_url=_required(config, "database", "url"),
            algod=ClientConfig(
                url=_required(config, "algod", "url"),
                token=config["algod"].get("token", ""),
            ),
            indexer=ClientConfig(
                url=_required(config, "indexer", "url"),
                token=config["indexer"].get("token", ""),
            ),
            sponsor_mnemonic=sponsor_mnemonic,
            server=ServerConfig(
                host=server.get("host", server_defaults.host),
                port=int(server.get("port", server_defaults.port)),
                frontend_url=server.get("frontend_url", server_defaults.frontend_url),
                production=bool(server.get("production", server_defaults.production)),
            ),
            log_level=config.get("logging", {}).get("level", "INFO"),
            admin=AdminCredentials(
                username=admin.get("username", ""),
                password=admin.get("password", ""),
                jwt_secret=admin.get("jwt_secret", ""),
            ),
        )

    def to_dict(self, redact: bool = True) -> dict[str, Any]:
        """
        :param redact: when True, secrets are replaced with a placeholder
        """

        def secret(value: str) -> str:
            if redact and value:
                return REDACTED
            return value

        return {
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "frontend_url": self.server.frontend_url,
                "production": self.server.production,
            },
            "logging": {"level": self.log_level},
            "database": {"url": self.database_url},
            "algod": {"url": self.algod.url, "token": secret(self.algod.token)},
            "indexer": {"url": self.indexer.url, "token": secret(self.indexer.token)},
            "sponsor": {"mnemonic": secret(str(self.sponsor_mnemonic))},
            "admin": {
                "username": self.admin.username,
                "password": secret(self.admin.password),
                "jwt_secret": secret(self.admin.jwt_secret),
            },
        }


def _required(config: dict[str, Any], section: str, key: str) -> Any:
    try:
        value = config[section][key]
    except (KeyError, TypeError) as err:
        raise ConfigError(f"[{section}] {key} is required") from err
    if value == "" or value is None:
        raise ConfigError(f"[{section}] {key} is required")
    return value
