"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

PLAYER_KINDS = ('human', 'computer', 'random')

@dataclass
class SearchConfig:
    """Configuration for the minimax computer opponent."""
    depth: int = 3  # Plies searched, including the root move
    use_pruning: bool = True
    pass_is_leaf: bool = True  # Score a side without moves instead of searching on

@dataclass
class GameConfig:
    """Configuration for who plays each side."""
    dark_player: str = "human"
    light_player: str = "computer"

@dataclass
class ArenaConfig:
    """Configuration for engine tournaments."""
    rounds: int = 2
    elo_k: float = 32.0
    initial_rating: float = 1500.0

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    seed: int = 42
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> 'Config':
        """
        Check values that the rest of the code relies on.

        Raises:
            ValueError: If any value is out of range
        """
        if self.search.depth < 1:
            raise ValueError(f"search.depth must be at least 1, got {self.search.depth}")
        for side in ('dark_player', 'light_player'):
            kind = getattr(self.game, side)
            if kind not in PLAYER_KINDS:
                raise ValueError(f"game.{side} must be one of {PLAYER_KINDS}, got {kind!r}")
        if self.arena.rounds < 1:
            raise ValueError(f"arena.rounds must be at least 1, got {self.arena.rounds}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            seed=config_dict.get('seed', 42),
            search=SearchConfig(**config_dict.get('search', {})),
            game=GameConfig(**config_dict.get('game', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        ).validate()

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config().validate()
