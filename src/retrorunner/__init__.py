from .game import Game, Intent, RenderSnapshot, RetroRunnerError, RunEnded

__all__ = ["Game", "Intent", "RenderSnapshot", "RetroRunnerError", "RunEnded"]
