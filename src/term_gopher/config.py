"""Configuration handling for the Gopher client."""

from dataclasses import dataclass, field
from pathlib import Path
import yaml

DEFAULT_CONFIG_PATH = "~/.config/term-gopher/config.yaml"

DEFAULT_STYLES = {
    "status": "bold",
    "error": "red",
    "info": "white",
    "text": "default",
    "item:text_file": "green",
    "item:submenu": "blue",
    "item:search": "red",
    "item:telnet": "purple",
    "item:ccso": "purple",
    "item:binary": "cyan",
    "item:dos_binary": "cyan",
    "item:binhex": "cyan",
    "item:uuencoded": "cyan",
    "item:gif": "yellow",
    "item:image": "yellow",
    "item:png": "yellow",
    "item:jpg": "yellow",
    "item:html": "green",
    "item:mirror": "blue",
    "item:unsupported": "white",
}


@dataclass(frozen=True)
class Config:
    """Configuration settings for the Gopher client.

    Attributes:
        default_port: Port used when an address gives none.
        timeout_seconds: Connect and read timeout for each fetch.
        encoding: Encoding of selectors and text replies.
        color: Whether to colour output with ANSI escapes.
        styles: Style tag to colour name mapping.
        command_prefix: Optional prefix accepted before command words.
        download_directory: Where relative 'save' paths land.
        log_file: Write logs here instead of standard error.
        browser_command: Program opening HTML items and URL: links.
        image_command: Program opening image items.
        telnet_command: Program started with host and port for telnet items.
        pager_command: Program text documents are piped through.
    """

    default_port: int = 70
    timeout_seconds: float = 10.0
    encoding: str = "utf-8"
    color: bool = True
    styles: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STYLES))
    command_prefix: str = "/"
    download_directory: str = "."
    log_file: str | None = None
    browser_command: str | None = None
    image_command: str | None = None
    telnet_command: str | None = None
    pager_command: str | None = None

    def get_download_path(self) -> Path:
        """Get download directory as expanded Path object."""
        return Path(self.download_directory).expanduser()


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return section


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the file or one of its sections is not a mapping.
    """
    config_path = Path(path).expanduser()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    # Extract sections
    network = _section(data, "network")
    display = _section(data, "display")
    commands = _section(data, "commands")
    downloads = _section(data, "downloads")
    logging_section = _section(data, "logging")
    handlers = _section(data, "handlers")

    defaults = Config()
    styles = dict(DEFAULT_STYLES)
    styles.update(_section(display, "styles"))

    return Config(
        default_port=network.get("default_port", defaults.default_port),
        timeout_seconds=network.get("timeout_seconds", defaults.timeout_seconds),
        encoding=network.get("encoding", defaults.encoding),
        color=display.get("color", defaults.color),
        styles=styles,
        command_prefix=commands.get("prefix", defaults.command_prefix),
        download_directory=downloads.get("directory", defaults.download_directory),
        log_file=logging_section.get("file", defaults.log_file),
        browser_command=handlers.get("browser"),
        image_command=handlers.get("image"),
        telnet_command=handlers.get("telnet"),
        pager_command=handlers.get("pager"),
    )
