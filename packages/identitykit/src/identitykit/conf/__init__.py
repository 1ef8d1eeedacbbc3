from .settings import AMBIENT_ENV_PREFIX, AmbientSettings

__all__ = ["AMBIENT_ENV_PREFIX", "AmbientSettings"]
