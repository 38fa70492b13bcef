"""Numeric configuration for quadrature and invariant checks."""
from __future__ import annotations

from dataclasses import dataclass, fields
import os
from typing import Mapping, Optional

from .params import InvalidParameter

_ENV_PREFIX = "GAUSS_MEASURE_"


@dataclass
class QuadratureConfig:
    epsabs: float = 1e-10
    epsrel: float = 1e-10
    limit: int = 200
    mass_tol: float = 1e-9

    def __post_init__(self) -> None:
        if not (self.epsabs > 0.0 and self.epsrel > 0.0):
            raise InvalidParameter("epsabs and epsrel must be positive")
        if int(self.limit) < 1:
            raise InvalidParameter("limit must be >= 1")
        if not (self.mass_tol > 0.0):
            raise InvalidParameter("mass_tol must be positive")
        self.limit = int(self.limit)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "QuadratureConfig":
        """
        Build a config from GAUSS_MEASURE_<FIELD> environment variables,
        e.g. GAUSS_MEASURE_EPSABS=1e-8. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name.upper())
            if raw is None or raw == "":
                continue
            try:
                kwargs[f.name] = int(raw) if f.name == "limit" else float(raw)
            except ValueError as e:
                raise InvalidParameter(f"{_ENV_PREFIX}{f.name.upper()}={raw!r} is not a number") from e
        return cls(**kwargs)


DEFAULT_CONFIG = QuadratureConfig()

__all__ = ["QuadratureConfig", "DEFAULT_CONFIG"]
