# File: hexmcts/config/__init__.py
from .app_config import APP_NAME
from .env_config import EnvConfig
from .mcts_config import MCTSConfig
from .protocol_config import ProtocolConfig
from .vis_config import VisConfig
from .validation import log_config_info_and_validate

__all__ = [
    "APP_NAME",
    "EnvConfig",
    "MCTSConfig",
    "ProtocolConfig",
    "VisConfig",
    "log_config_info_and_validate",
]
