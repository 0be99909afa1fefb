"""Command line entry point: ``rbm-train model=... dataset=...``.

The ``model`` node is a Hydra ``_target_`` spec building the model to train;
the ``dataset`` node builds an ``(inputs, targets)`` pair where ``targets`` is
``None`` for plain training.
"""

from __future__ import annotations

import hydra
from hydra.core.config_store import ConfigStore
from hydra.utils import instantiate
from omegaconf import DictConfig

from .config import ExperimentConfig
from .training.runner import TrainingRunner
from .utils.logging_utils import setup_logger

cs = ConfigStore.instance()
cs.store(name="base_experiment", node=ExperimentConfig)


def create_model(cfg: DictConfig):
    return instantiate(cfg.model)


def create_dataset(cfg: DictConfig):
    inputs, targets = instantiate(cfg.dataset)
    return inputs, targets


@hydra.main(version_base=None, config_path="configs", config_name="default")
def main(cfg: DictConfig) -> None:
    setup_logger(
        name=cfg.logging.name,
        log_dir=cfg.logging.log_dir,
        filename=cfg.logging.filename,
        level=cfg.logging.level,
    )
    TrainingRunner(cfg, create_dataset=create_dataset, create_model=create_model).run()


if __name__ == "__main__":
    main()
