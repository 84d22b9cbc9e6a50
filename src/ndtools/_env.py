__all__ = ['env']

from pydantic import PositiveFloat
from pydantic_settings import BaseSettings


class Env(BaseSettings):
    # Default half-width of the transition band for `soft_theta`,
    # `soft_delta` and the decays built on them
    NDTOOLS_SOFT_EPS: PositiveFloat = 0.01

    # Raise when `pad_value` cannot be represented in the element type.
    # When disabled the cast is done anyway with a warning.
    NDTOOLS_STRICT_PAD: bool = True


env = Env()
