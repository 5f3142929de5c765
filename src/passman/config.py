"""Configuration for passman."""

import logging


class Config:
    """Configuration settings for passman."""

    DEFAULT_DATABASE_PATH = "./database.json"

    # Generator
    PASSWORD_LENGTH = 20

    # Diagnostics go to stderr through the rich log handler
    LOG_LEVEL = logging.WARNING

    def __init__(self):
        """Initialize configuration with the default database location."""
        self.database_path = self.DEFAULT_DATABASE_PATH


config = Config()
