"""Directory history for Neovim's :cd."""
