"""Structured logging utilities.

Invariants
- Idempotent handler installation per logger.
- Validation: metric values must be finite floats.

Public API
- get_logger(name="gauss-measure", level=logging.WARNING) -> logging.Logger
- log_metric(name, value, logger=None) -> None
- log_metrics(metrics: dict[str, float], logger=None) -> None
"""
from __future__ import annotations

import logging
import math
from typing import Mapping

LOGGER_NAME = "gauss-measure"


def get_logger(name: str = LOGGER_NAME, level: int | None = None) -> logging.Logger:
    """
    Return a configured logger with concise formatter.

    Idempotent: installs at most one StreamHandler marked by _gauss_measure_handler.
    The level is only changed when given explicitly.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(int(level))
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)
    logger.propagate = False

    has_handler = any(getattr(h, "_gauss_measure_handler", False) for h in logger.handlers)
    if not has_handler:
        handler = logging.StreamHandler()
        handler._gauss_measure_handler = True  # type: ignore[attr-defined]
        formatter = logging.Formatter(
            fmt="%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def _ensure_finite_float(x: object, name: str) -> float:
    try:
        val = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a real number convertible to float") from e
    if not math.isfinite(val):
        raise ValueError(f"{name} must be finite, got {val}")
    return val


def _format_float(x: float) -> str:
    return f"{x:.10g}"


def log_metric(name: str, value: float, logger: logging.Logger | None = None) -> None:
    """Log a single metric as: "metric name=value"."""
    if not isinstance(name, str) or not name:
        raise ValueError("name must be a non-empty string")
    v = _ensure_finite_float(value, "value")
    lg = logger if logger is not None else get_logger()
    lg.info(f"metric {name}={_format_float(v)}")


def log_metrics(metrics: Mapping[str, float], logger: logging.Logger | None = None) -> None:
    """
    Log a dictionary of metrics as: "metrics k1=v1 k2=v2 ...".

    Keys are sorted for deterministic ordering.
    """
    if not isinstance(metrics, Mapping) or len(metrics) == 0:
        raise ValueError("metrics must be a non-empty mapping of str->float")
    parts: list[str] = []
    for k in sorted(metrics.keys()):
        if not isinstance(k, str) or not k:
            raise ValueError("metric keys must be non-empty strings")
        v = _ensure_finite_float(metrics[k], f"value for '{k}'")
        parts.append(f"{k}={_format_float(v)}")
    lg = logger if logger is not None else get_logger()
    lg.info("metrics " + " ".join(parts))


__all__ = ["LOGGER_NAME", "get_logger", "log_metric", "log_metrics"]
