"""Game configuration module - centralized storage for all game parameters."""

from shot_assist.config.game_config import GameConfig, create_game_config, load_game_config

__all__ = ['GameConfig', 'create_game_config', 'load_game_config']
