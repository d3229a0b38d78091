"""
SPARQL Client Configuration Loader

This module provides functionality to load and validate SPARQL client
configuration from YAML files, and the immutable request settings derived
from it.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..utils.client_utils import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class Method(str, Enum):
    """HTTP methods allowed by the SPARQL Protocol."""
    GET = "GET"
    POST = "POST"
    
    @classmethod
    def parse(cls, value: Any) -> "Method":
        """
        Coerce a method name into a Method.
        
        Raises:
            ConfigurationError: If the value is not GET or POST
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ConfigurationError(f"unknown HTTP method: {value!r}")


class Protocol(str, Enum):
    """SPARQL Protocol versions."""
    V1_0 = "1.0"
    V1_1 = "1.1"
    
    @classmethod
    def parse(cls, value: Any) -> "Protocol":
        """
        Coerce a version such as ``"1.1"`` or ``1.1`` into a Protocol.
        
        Raises:
            ConfigurationError: If the value is not a known protocol version
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            raise ConfigurationError(f"unknown SPARQL protocol version: {value!r}")


class Operation(str, Enum):
    """Kind of the pending request."""
    QUERY = "query"
    UPDATE = "update"


class RequestSettings(BaseModel):
    """Validated, immutable settings every request of one client is built from."""
    model_config = ConfigDict(frozen=True)
    
    method: Method = Field(
        Method.POST,
        description="HTTP method used for queries and updates"
    )
    protocol: Protocol = Field(
        Protocol.V1_0,
        description="SPARQL Protocol version used to encode POST bodies"
    )
    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Default HTTP headers sent with every request"
    )
    timeout: float = Field(
        DEFAULT_TIMEOUT,
        gt=0,
        description="Transport timeout in seconds"
    )
    
    @field_validator('method', mode='before')
    @classmethod
    def _coerce_method(cls, value: Any) -> Any:
        return Method.parse(value)
    
    @field_validator('protocol', mode='before')
    @classmethod
    def _coerce_protocol(cls, value: Any) -> Any:
        return Protocol.parse(value)


class SparqlClientConfig:
    """
    SPARQL client configuration loader and manager.
    
    Loads configuration from YAML files and provides access to configuration
    sections for connecting to a SPARQL endpoint.
    """
    
    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the client configuration loader.
        
        Args:
            config_path: Path to configuration file. If None, uses default locations or built-in defaults.
        """
        self.config_data: Dict[str, Any] = {}
        self.config_path: Optional[str] = None
        
        if config_path is not None:
            self.load_config(config_path)
        else:
            self._load_default_config()
    
    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "SparqlClientConfig":
        """Create a configuration from an in-memory dictionary."""
        config = cls.__new__(cls)
        config.config_data = dict(config_data)
        config.config_path = "<in-memory configuration>"
        return config
    
    def load_config(self, config_path: str) -> None:
        """
        Load configuration from a specific file path.
        
        Args:
            config_path: Path to the YAML configuration file
            
        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
        """
        config_file = Path(config_path)
        
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML configuration: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration file: {e}")
        
        if not isinstance(self.config_data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {config_path}")
        
        self.config_path = str(config_file.absolute())
        logger.info(f"Loaded client configuration from: {self.config_path}")
    
    def _load_default_config(self) -> None:
        """
        Load default configuration by searching standard locations or using built-in defaults.
        """
        default_paths = [
            "sparqlclient-config.yaml",
            os.path.expanduser("~/.sparqlclient/sparqlclient-config.yaml"),
        ]
        
        for path in default_paths:
            if os.path.exists(path):
                try:
                    self.load_config(path)
                    return
                except ConfigurationError as e:
                    logger.warning(f"Skipping unreadable config {path}: {e}")
                    continue
        
        self.config_data = {
            'endpoint': {
                'url': None
            },
            'request': {
                'method': Method.POST.value,
                'protocol': Protocol.V1_0.value,
                'headers': {}
            },
            'client': {
                'timeout': DEFAULT_TIMEOUT
            }
        }
        self.config_path = "<built-in defaults>"
        logger.debug("Using built-in default configuration")
    
    def get_endpoint_config(self) -> Dict[str, Any]:
        return self.config_data.get('endpoint') or {}
    
    def get_request_config(self) -> Dict[str, Any]:
        return self.config_data.get('request') or {}
    
    def get_client_config(self) -> Dict[str, Any]:
        return self.config_data.get('client') or {}
    
    def get_endpoint_url(self) -> Optional[str]:
        """
        Get the SPARQL endpoint URL.
        
        Returns:
            Endpoint URL string, or None if not configured
        """
        return self.get_endpoint_config().get('url')
    
    def get_method(self) -> Any:
        """Get the configured HTTP method (unvalidated)."""
        return self.get_request_config().get('method', Method.POST.value)
    
    def get_protocol(self) -> Any:
        """Get the configured SPARQL protocol version (unvalidated)."""
        return self.get_request_config().get('protocol', Protocol.V1_0.value)
    
    def get_headers(self) -> Dict[str, str]:
        """Get the configured default headers."""
        return dict(self.get_request_config().get('headers') or {})
    
    def get_timeout(self) -> float:
        """
        Get the transport timeout in seconds.
        
        Returns:
            Timeout in seconds
        """
        return self.get_client_config().get('timeout', DEFAULT_TIMEOUT)
    
    def to_request_settings(self, **overrides: Any) -> RequestSettings:
        """
        Build validated request settings from this configuration.
        
        Args:
            **overrides: method, protocol, headers or timeout values that take
                precedence over the loaded configuration (None values are ignored)
            
        Returns:
            Frozen RequestSettings instance
            
        Raises:
            ConfigurationError: If any value is invalid
        """
        values = {
            'method': self.get_method(),
            'protocol': self.get_protocol(),
            'headers': self.get_headers(),
            'timeout': self.get_timeout(),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        
        try:
            return RequestSettings(**values)
        except ConfigurationError:
            raise
        except ValidationError as e:
            raise ConfigurationError(f"Invalid request settings: {e}")
    
    def validate_config(self) -> None:
        """
        Validate the loaded configuration.
        
        Raises:
            ConfigurationError: If configuration is invalid
        """
        url = self.get_endpoint_url()
        if url is not None:
            if not isinstance(url, str) or not url.startswith(('http://', 'https://')):
                raise ConfigurationError("Endpoint URL must start with http:// or https://")
        
        self.to_request_settings()
        logger.debug("Client configuration validation passed")
    
    def __str__(self) -> str:
        return f"SparqlClientConfig(path={self.config_path}, endpoint_url={self.get_endpoint_url()})"
