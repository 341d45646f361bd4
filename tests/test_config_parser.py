import pytest
import json

from batch_progress import ConfigParser, ConfigurationError, Config, LoggingConfig
from batch_progress.config import TrackerConfig
from batch_progress.exceptions import describe_validation_error, first_error_field
from pydantic import ValidationError


class TestConfigParser:
    
    def test_load_yaml_config(self, temp_dir):
        """Test loading YAML configuration"""
        yaml_content = """
tracker:
  total_items: 200
  window_size: 25
logging:
  level: debug
"""
        yaml_file = temp_dir / "config.yaml"
        with open(yaml_file, 'w') as f:
            f.write(yaml_content)
        
        config = ConfigParser.load_config(str(yaml_file))
        
        assert config["tracker"]["total_items"] == 200
        assert config["tracker"]["window_size"] == 25
        assert config["logging"]["level"] == "debug"
    
    def test_load_json_config(self, temp_dir, sample_config_dict):
        """Test loading JSON configuration"""
        json_file = temp_dir / "config.json"
        with open(json_file, 'w') as f:
            json.dump(sample_config_dict, f)
        
        config = ConfigParser.load_config(str(json_file))
        
        assert config == sample_config_dict
    
    def test_load_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            ConfigParser.load_config(str(temp_dir / "missing.yaml"))
    
    def test_load_unsupported_type(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text("[tracker]\n")
        
        with pytest.raises(ValueError, match="Unsupported config file type"):
            ConfigParser.load_config(str(path))
    
    def test_load_from_env(self, monkeypatch):
        """Test loading configuration from environment variables"""
        monkeypatch.setenv("BATCH_PROGRESS_TRACKER_TOTAL_ITEMS", "40")
        monkeypatch.setenv("BATCH_PROGRESS_TRACKER_WINDOW_SIZE", "4")
        monkeypatch.setenv("BATCH_PROGRESS_LOGGING_LEVEL", "WARNING")
        
        config = ConfigParser.load_from_env()
        
        assert config["tracker"]["total_items"] == 40
        assert config["tracker"]["window_size"] == 4
        assert config["logging"]["level"] == "WARNING"
    
    def test_merge_configs(self, sample_config_dict):
        """Test merging configurations"""
        override = {"tracker": {"window_size": 20}}
        
        merged = ConfigParser.merge_configs(sample_config_dict, override)
        
        assert merged["tracker"]["total_items"] == 50
        assert merged["tracker"]["window_size"] == 20
        assert merged["logging"]["level"] == "DEBUG"
    
    def test_build_config(self, sample_config_dict):
        config = ConfigParser.build_config(sample_config_dict)
        
        assert isinstance(config, Config)
        assert config.tracker == TrackerConfig(total_items=50, window_size=5)
        assert config.logging.level == "DEBUG"
    
    def test_build_config_invalid(self, sample_config_dict):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigParser.build_config(sample_config_dict, {"tracker": {"total_items": 0}})
        
        assert exc_info.value.field == "tracker.total_items"
        assert isinstance(exc_info.value.original_error, ValidationError)
    
    def test_build_config_missing_tracker(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigParser.build_config({"logging": {"level": "INFO"}})
        
        assert exc_info.value.field == "tracker"
    
    def test_save_and_reload(self, temp_dir, sample_config_dict):
        for name in ["saved.yaml", "saved.json"]:
            path = temp_dir / "nested" / name
            ConfigParser.save_config(sample_config_dict, str(path))
            
            assert ConfigParser.load_config(str(path)) == sample_config_dict
    
    def test_example_config_is_valid(self):
        config = ConfigParser.build_config(ConfigParser.create_example_config())
        
        assert config.tracker.window_size == 10


class TestSchemas:
    
    def test_tracker_defaults(self):
        config = TrackerConfig(total_items=3)
        
        assert config.window_size == 10
    
    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")
    
    def test_log_directory_created(self, temp_dir):
        log_file = temp_dir / "logs" / "progress.log"
        
        Config(tracker=TrackerConfig(total_items=1), logging=LoggingConfig(file=log_file))
        
        assert log_file.parent.exists()


class TestConfigurationError:
    
    def test_from_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            TrackerConfig(total_items=0, window_size=-1)
        
        error = ConfigurationError.from_validation_error("Bad tracker", exc_info.value)
        
        assert str(error).startswith("Bad tracker: total_items:")
        assert "window_size:" in str(error)
        assert error.field == "total_items"
        assert error.original_error is exc_info.value
    
    def test_describe_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Config.model_validate({})
        
        assert describe_validation_error(exc_info.value) == "tracker: Field required"
        assert first_error_field(exc_info.value) == "tracker"
