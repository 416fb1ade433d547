import os
import toml
import logging
from dataclasses import dataclass, field
from typing import Optional, Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "anthropic.claude-3-haiku-20240307-v1:0"
DEFAULT_CONFIG_DIR = os.path.expanduser("~/.config/cli-help")


def _load_config_file(config_file: str) -> Dict[str, Any]:
    """Loads configuration from the TOML file. A missing file yields an empty config."""
    if not os.path.exists(config_file):
        return {}
    try:
        with open(config_file, 'r') as f:
            return toml.load(f)
    except (toml.TomlDecodeError, IOError) as e:
        logger.warning(f"Could not read config file at {config_file}. Error: {e}")
        return {}


def _get_config(file_config: Dict[str, Any], key: str, default: Optional[Any] = None) -> Any:
    """
    Get a configuration value, prioritizing environment variables,
    then the config file, and finally a default value.
    """
    # 1. Check environment variable
    value = os.environ.get(key)
    if value:
        return value

    # 2. Check config file (top-level keys or any section)
    if key in file_config and not isinstance(file_config[key], dict):
        return file_config[key]
    for section in file_config.values():
        if isinstance(section, dict) and key in section:
            return section[key]

    # 3. Return default
    return default


@dataclass(frozen=True)
class Config:
    """Startup configuration, built once and handed to every component."""

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    unsafe: bool = False
    ai: bool = False
    verbose: bool = False
    shell: str = "bash"
    config_dir: str = DEFAULT_CONFIG_DIR
    log_dir: str = field(default_factory=lambda: os.path.join(DEFAULT_CONFIG_DIR, "logs"))

    @classmethod
    def load(cls, unsafe: bool = False, ai: bool = False, verbose: bool = False,
             config_dir: Optional[str] = None) -> "Config":
        """Resolve settings from the environment and config.toml and freeze them."""
        config_dir = config_dir or DEFAULT_CONFIG_DIR
        file_config = _load_config_file(os.path.join(config_dir, "config.toml"))

        return cls(
            # The credential is only ever taken from the environment
            api_key=os.environ.get("AWS_BEARER_TOKEN_BEDROCK") or None,
            model=str(_get_config(file_config, "BEDROCK_MODEL_ID", DEFAULT_MODEL)),
            unsafe=unsafe,
            ai=ai,
            verbose=verbose,
            config_dir=config_dir,
            log_dir=str(_get_config(file_config, "CLI_HELP_LOG_DIR", os.path.join(config_dir, "logs"))),
        )

    def __str__(self) -> str:
        """Return string representation of the configuration."""
        config_dict = self.__dict__.copy()
        if self.api_key:
            config_dict['api_key'] = f"{self.api_key[:4]}...{self.api_key[-4:]}" if len(self.api_key) > 8 else "****"
        return str(config_dict)
