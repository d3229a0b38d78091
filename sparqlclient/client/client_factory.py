"""SPARQL Client Factory

Creates a SparqlClient from a YAML configuration file or a loaded configuration.
"""

import logging
from typing import Any, Optional

from .sparql_client import SparqlClient
from .config.client_config_loader import SparqlClientConfig

logger = logging.getLogger(__name__)


def create_sparql_client(config_path: Optional[str] = None, *,
                         config: Optional[SparqlClientConfig] = None,
                         **overrides: Any) -> SparqlClient:
    """
    Create a SPARQL client from configuration.
    
    Args:
        config_path: Path to the client configuration YAML file (optional if config provided)
        config: Pre-configured SparqlClientConfig object (takes precedence over config_path)
        **overrides: Keyword arguments passed to SparqlClient (url, method, protocol, ...)
        
    Returns:
        SparqlClient
        
    Raises:
        ConfigurationError: If configuration loading or validation fails
    """
    if config is not None:
        client_config = config
        logger.info("Using provided config object for client creation")
    elif config_path is not None:
        client_config = SparqlClientConfig(config_path)
        logger.info(f"Loaded config from {config_path} for client creation")
    else:
        client_config = SparqlClientConfig()
        logger.info("Using default config for client creation")
    
    client_config.validate_config()
    return SparqlClient(config=client_config, **overrides)
