"""
Logging configuration for AccessRoute routing engine
"""

import logging
import os
import sys
from typing import Optional

from .config import config


class AccessRouteLogger:
    """Centralized logging for AccessRoute routing engine"""
    
    def __init__(self, name: str = "accessroute.engine", level: int = logging.INFO,
                 log_file: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.log_file = log_file
        
        # Prevent duplicate handlers
        if not self.logger.handlers:
            self._setup_handlers()
    
    def _setup_handlers(self):
        """Setup console and optional file handlers"""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.logger.level)
        console_format = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(console_format)
        self.logger.addHandler(console_handler)
        
        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(logging.DEBUG)
            file_format = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
            )
            file_handler.setFormatter(file_format)
            self.logger.addHandler(file_handler)
    
    def info(self, message: str):
        """Log info message"""
        self.logger.info(message)
    
    def debug(self, message: str):
        """Log debug message"""
        self.logger.debug(message)
    
    def warning(self, message: str):
        """Log warning message"""
        self.logger.warning(message)
    
    def error(self, message: str):
        """Log error message"""
        self.logger.error(message)
    
    def critical(self, message: str):
        """Log critical message"""
        self.logger.critical(message)
    
    def log_route_request(self, origin: tuple, destination: tuple, preferences,
                          duration_ms: float, success: bool):
        """Log route request metrics"""
        self.info(f"Route request: {origin} -> {destination}, "
                  f"wheelchair={preferences.requires_wheelchair_access}, "
                  f"well_lit={preferences.prefer_well_lit}, "
                  f"rest_stops={preferences.needs_rest_stops}, "
                  f"duration={duration_ms:.2f}ms, success={success}")


# Global logger instance
logger = AccessRouteLogger(level=getattr(logging, config.log_level.upper(), logging.INFO),
                           log_file=config.log_file)
