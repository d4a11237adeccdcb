# Entry point for Neovim's remote plugin host
from nvcd.plugin import Plugin  # noqa: F401
