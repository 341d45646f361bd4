import json
import yaml
from pathlib import Path
from typing import Dict, Any
import os

from pydantic import ValidationError

from .schemas import Config
from ..exceptions import ConfigurationError
from ..utils.helpers import merge_configs


ENV_PREFIX = "BATCH_PROGRESS_"


class ConfigParser:
    """Parse configuration from files and environment variables"""
    
    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """Load configuration from file"""
        path = Path(config_path)
        
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        
        # Determine file type
        if path.suffix in ['.yaml', '.yml']:
            return ConfigParser._load_yaml(path)
        elif path.suffix == '.json':
            return ConfigParser._load_json(path)
        else:
            raise ValueError(f"Unsupported config file type: {path.suffix}")
    
    @staticmethod
    def _load_yaml(path: Path) -> Dict[str, Any]:
        """Load YAML configuration"""
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}
    
    @staticmethod
    def _load_json(path: Path) -> Dict[str, Any]:
        """Load JSON configuration"""
        with open(path, 'r') as f:
            return json.load(f)
    
    @staticmethod
    def load_from_env(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
        """Load configuration from environment variables
        
        The first segment after the prefix names the section, the rest
        is the key inside it:
            BATCH_PROGRESS_TRACKER_WINDOW_SIZE=5 -> {"tracker": {"window_size": 5}}
            BATCH_PROGRESS_LOGGING_LEVEL=DEBUG -> {"logging": {"level": "DEBUG"}}
        """
        config: Dict[str, Any] = {}
        
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            
            config_key = key[len(prefix):].lower()
            if '_' in config_key:
                section, name = config_key.split('_', 1)
                config.setdefault(section, {})[name] = ConfigParser._parse_env_value(value)
            else:
                config[config_key] = ConfigParser._parse_env_value(value)
        
        return config
    
    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """Parse environment variable value"""
        # Try to parse as JSON first
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            # Fall back to string
            return value
    
    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge multiple configurations
        
        Later configs override earlier ones
        """
        result: Dict[str, Any] = {}
        
        for config in configs:
            if config:
                result = merge_configs(result, config)
        
        return result
    
    @staticmethod
    def build_config(*configs: Dict[str, Any]) -> Config:
        """Merge and validate configurations into a Config"""
        merged = ConfigParser.merge_configs(*configs)
        try:
            return Config.model_validate(merged)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error("Invalid configuration", e) from e
    
    @staticmethod
    def save_config(config: Dict[str, Any], output_path: str):
        """Save configuration to file"""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        
        if path.suffix in ['.yaml', '.yml']:
            with open(path, 'w') as f:
                yaml.dump(config, f, default_flow_style=False)
        else:
            with open(path, 'w') as f:
                json.dump(config, f, indent=2)
    
    @staticmethod
    def create_example_config() -> Dict[str, Any]:
        """Create an example configuration"""
        return {
            "tracker": {
                "total_items": 100,
                "window_size": 10
            },
            "logging": {
                "level": "INFO"
            }
        }
