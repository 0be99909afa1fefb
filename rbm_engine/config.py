"""Structured experiment configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from omegaconf import DictConfig, OmegaConf


@dataclass
class TrainConfig:
    epochs: int = 10
    runs: int = 1
    watch: bool = True


@dataclass
class LoggingConfig:
    name: str = "rbm_engine"
    log_dir: Optional[str] = "logs"
    filename: str = "train.log"
    level: str = "INFO"


@dataclass
class ExperimentConfig:
    seed: Optional[int] = None
    results_path: Optional[str] = None
    train: TrainConfig = field(default_factory=TrainConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    # hydra ``_target_`` specs, see rbm_engine.cli
    model: Any = None
    dataset: Any = None


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Iterable[str] = (),
) -> DictConfig:
    """Merge the structured defaults, an optional YAML file and ``key=value`` overrides."""
    cfg = OmegaConf.structured(ExperimentConfig)
    if path is not None:
        cfg = OmegaConf.merge(cfg, OmegaConf.load(str(path)))
    overrides = list(overrides)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(overrides))
    return cfg

