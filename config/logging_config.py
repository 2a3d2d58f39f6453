"""
Environment-specific logging configuration
"""
import logging
import os
from typing import Dict, Any


def get_logging_config() -> Dict[str, Any]:
    """Get logging configuration based on environment"""

    is_production = os.getenv("RENDER") is not None or os.getenv("ENV") == "production"
    is_debug = os.getenv("DEBUG", "false").lower() == "true"

    config = {
        "production": {
            # Production: milestones and failures only
            "default_level": "WARNING",
            "console_format": "%(levelname)s - %(message)s",
            "suppress_modules": [
                "aiohttp.access",
                "agents.tools.brand.page_fetcher",
                "agents.tools.brand.logo_extractor",
            ],
        },
        "development": {
            "default_level": "INFO",
            "console_format": "%(asctime)s - %(levelname)s - %(message)s",
            "suppress_modules": ["aiohttp.access"],
        },
        "debug": {
            # Debug: everything, with source locations
            "default_level": "DEBUG",
            "console_format": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
            "suppress_modules": [],
        },
    }

    if is_debug:
        selected_config = dict(config["debug"])
    elif is_production:
        selected_config = dict(config["production"])
    else:
        selected_config = dict(config["development"])

    selected_config["environment"] = "debug" if is_debug else ("production" if is_production else "development")
    return selected_config


def apply_logging_config(config: Dict[str, Any] = None) -> Dict[str, Any]:
    """Apply logging configuration to Python's logging system"""
    if config is None:
        config = get_logging_config()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config["default_level"]))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(config["console_format"]))
    root_logger.handlers = [console_handler]

    for module in config.get("suppress_modules", []):
        logging.getLogger(module).setLevel(logging.WARNING)

    return config
