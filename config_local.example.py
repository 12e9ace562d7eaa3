# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for everything else. Only the connector switches below are read.
"""

# Example: run the live watcher without the interactive console
# CONSOLE_ENABLED = False

# Example: disable "Live now" announcements
# WATCH_ENABLED = False
