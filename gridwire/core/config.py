"""
Router configuration with Pydantic validation
"""

from typing import Any, Dict, Optional, Union
from pathlib import Path
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class RouterConfig(BaseModel):
    """Tunable pathfinding parameters"""
    model_config = ConfigDict(extra='ignore')

    step_cost: int = Field(1, ge=1, description="Cost of one step, in the caller's spatial unit")
    turn_penalty_ratio: float = Field(2.0, ge=0.0, description="Default turn penalty as a multiple of step_cost")
    max_expanded_nodes: Optional[int] = Field(100_000, gt=0, description="Expansion budget per search (None = unlimited)")

    @property
    def default_turn_penalty(self) -> int:
        """Turn penalty used when a search does not pass one explicitly"""
        return int(round(self.turn_penalty_ratio * self.step_cost))

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'RouterConfig':
        """Validate a plain dictionary (e.g. parsed from YAML)"""
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {str(e)}") from e


def load_router_config(yaml_path: Union[str, Path]) -> RouterConfig:
    """
    Load router configuration from a YAML file

    The settings may sit at the top level or under a 'router' key.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed or fails validation
    """
    try:
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file: {str(e)}") from e
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

    if isinstance(config_dict, dict) and 'router' in config_dict:
        config_dict = config_dict['router']

    return RouterConfig.from_dict(config_dict)
