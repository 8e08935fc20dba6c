# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for GetOptions."""
import logging

logger = logging.getLogger("getoptions")
