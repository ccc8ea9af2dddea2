"""
Freelancer Player Stats - Configuration System

A lightweight JSON profile configuration for the player report tools.

Quick Usage:
    from config import Config

    server_config = Config(profile='my_server')
    save_dir = server_config.get('paths.save_dir')
"""

from config.config import Config

__all__ = ['Config']
