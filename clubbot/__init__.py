"""Motor, odometry, waypoint, sensor, touchscreen, font and drawing logic for a small club robot."""

__version__ = "0.1.0"
__all__ = ["motor", "navigation", "waypoints", "sensors", "touchscreen", "font", "gfx"]