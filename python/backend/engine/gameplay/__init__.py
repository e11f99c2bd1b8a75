from backend.engine.gameplay.game import CelebrationHook, GamePlay

__all__ = ["CelebrationHook", "GamePlay"]
