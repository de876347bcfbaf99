# File: hexmcts/config/validation.py
import logging
from typing import Dict, Optional

from pydantic import BaseModel, ValidationError

from .env_config import EnvConfig
from .mcts_config import MCTSConfig
from .protocol_config import ProtocolConfig
from .vis_config import VisConfig

logger = logging.getLogger(__name__)


def log_config_info_and_validate(
    mcts_config_instance: Optional[MCTSConfig] = None,
    env_config_instance: Optional[EnvConfig] = None,
) -> Dict[str, BaseModel]:
    """
    Validates every configuration model and logs a summary of the values.
    Logs instead of printing: stdout may be the protocol channel.
    Returns the validated instances keyed by section name.
    """
    all_valid = True
    configs_validated: Dict[str, Optional[BaseModel]] = {}

    provided = {
        "MCTS": mcts_config_instance,
        "Environment": env_config_instance,
    }
    config_classes = {
        "Environment": EnvConfig,
        "MCTS": MCTSConfig,
        "Protocol": ProtocolConfig,
        "Visualization": VisConfig,
    }

    for name, ConfigClass in config_classes.items():
        try:
            instance = provided.get(name)
            if instance is None:
                instance = ConfigClass()
            else:
                # Re-validate: instances may have been mutated after creation
                instance = ConfigClass.model_validate(instance.model_dump())
            configs_validated[name] = instance
        except ValidationError as e:
            logger.error(f"Validation failed for {name} Config: {e}")
            all_valid = False
            configs_validated[name] = None

    for name, instance in configs_validated.items():
        if instance is None:
            logger.info(f"--- {name} Config: <Validation Failed>")
            continue
        values = ", ".join(f"{k}={v}" for k, v in instance.model_dump().items())
        logger.info(f"--- {name} Config: {values}")

    if not all_valid:
        logger.critical("Configuration validation failed. Please check errors above.")
        raise ValueError("Invalid configuration settings.")

    logger.debug("All configurations validated successfully.")
    return configs_validated  # type: ignore[return-value]
