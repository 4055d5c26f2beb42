"""
Configuration management for AccessRoute routing engine
"""

import os
from typing import Optional


class Config:
    """Configuration class for AccessRoute routing engine"""
    
    def __init__(self):
        # Search lattice and radii
        self.grid_size_deg: float = float(os.getenv('GRID_SIZE_DEG', '0.0001'))
        self.arrival_threshold_m: float = float(os.getenv('ARRIVAL_THRESHOLD_M', '5'))
        self.feature_detection_radius_m: float = float(os.getenv('FEATURE_DETECTION_RADIUS_M', '20'))
        self.obstacle_clearance_radius_m: float = float(os.getenv('OBSTACLE_CLEARANCE_RADIUS_M', '1'))
        
        # 0 disables the budget
        self.max_expansions: int = int(os.getenv('MAX_EXPANSIONS', '20000'))
        
        # Navigation cadence
        self.location_update_interval_ms: int = int(os.getenv('LOCATION_UPDATE_INTERVAL_MS', '1000'))
        self.minimum_distance_change_m: float = float(os.getenv('MINIMUM_DISTANCE_CHANGE_M', '1'))
        self.guidance_interval_close_ms: int = int(os.getenv('GUIDANCE_INTERVAL_CLOSE_MS', '3000'))
        self.guidance_interval_medium_ms: int = int(os.getenv('GUIDANCE_INTERVAL_MEDIUM_MS', '5000'))
        self.guidance_interval_far_ms: int = int(os.getenv('GUIDANCE_INTERVAL_FAR_MS', '10000'))
        
        # API configuration
        self.host: str = os.getenv('HOST', '0.0.0.0')
        self.port: int = int(os.getenv('PORT', '5000'))
        self.debug: bool = os.getenv('DEBUG', 'False').lower() == 'true'
        
        # Logging
        self.log_level: str = os.getenv('LOG_LEVEL', 'INFO')
        self.log_file: Optional[str] = os.getenv('LOG_FILE')
    
    def validate(self):
        """Validate configuration"""
        if self.grid_size_deg <= 0:
            raise ValueError("Grid size must be positive")
        
        if self.arrival_threshold_m <= 0:
            raise ValueError("Arrival threshold must be positive")
        
        if self.feature_detection_radius_m <= 0:
            raise ValueError("Feature detection radius must be positive")
        
        if self.obstacle_clearance_radius_m < 0:
            raise ValueError("Obstacle clearance radius must not be negative")
        
        if self.max_expansions < 0:
            raise ValueError("Max expansions must not be negative")
        
        if self.log_level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Unknown log level: {self.log_level}")
    
    def get_router_config(self) -> dict:
        """Get configuration for AccessibilityRouteService"""
        return {
            'grid_size': self.grid_size_deg,
            'arrival_threshold_m': self.arrival_threshold_m,
            'feature_radius_m': self.feature_detection_radius_m,
            'clearance_radius_m': self.obstacle_clearance_radius_m,
            'max_expansions': self.max_expansions or None,
        }
    
    def get_navigation_config(self) -> dict:
        """Get configuration for NavigationSession"""
        return {
            'minimum_distance_change_m': self.minimum_distance_change_m,
            'intervals_ms': (
                self.guidance_interval_close_ms,
                self.guidance_interval_medium_ms,
                self.guidance_interval_far_ms,
            ),
        }
    
    def get_api_config(self) -> dict:
        """Get configuration for Flask API"""
        return {
            'host': self.host,
            'port': self.port,
            'debug': self.debug
        }


# Global configuration instance
config = Config()
