"""Configuration schemas using Pydantic."""

from typing import Optional, Any
from pathlib import Path
from pydantic import BaseModel, Field, field_validator


class TrackerConfig(BaseModel):
    """Configuration for a progress tracker."""
    
    total_items: int = Field(..., ge=1, description="Number of iterations in the batch")
    window_size: int = Field(10, ge=1, description="Iterations kept for the sliding average")


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    
    level: str = Field("INFO", description="Logging level")
    file: Optional[Path] = Field(None, description="Log file path")
    format: str = Field(
        "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}",
        description="Log format string"
    )
    rotation: Optional[str] = Field("1 day", description="Log rotation")
    retention: Optional[str] = Field("7 days", description="Log retention")
    
    @field_validator("level")
    def validate_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()


class Config(BaseModel):
    """Main configuration schema."""
    
    tracker: TrackerConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    
    def model_post_init(self, __context: Any) -> None:
        """Post-initialization validation."""
        super().model_post_init(__context)
        
        # Ensure log directory exists if log file is specified
        if self.logging.file:
            self.logging.file.parent.mkdir(parents=True, exist_ok=True)
