"""High level orchestration for running seeded RBM training experiments."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple

import torch
from omegaconf import DictConfig

from .trainer import RbmTrainer
from .watcher import Watcher
from ..utils.seed import set_seed

logger = logging.getLogger(__name__)

DatasetFactory = Callable[[DictConfig], Tuple[Sequence[Any], Optional[Sequence[Any]]]]
ModelFactory = Callable[[DictConfig], Any]
WatcherFactory = Callable[[], Watcher]

DEFAULT_SEEDS = [21, 42, 41, 95, 12, 35, 66, 85, 3, 1234]


@dataclass
class TrainingArtifacts:
    seed: int
    reconstruction_error: float
    per_epoch_seconds: float
    total_hours: float


class TrainingRunner:
    """Execute one or multiple training runs according to a configuration."""

    def __init__(
        self,
        cfg: DictConfig,
        create_dataset: DatasetFactory,
        create_model: ModelFactory,
        watcher_factory: Optional[WatcherFactory] = None,
    ) -> None:
        self.cfg = cfg
        self._create_dataset = create_dataset
        self._create_model = create_model
        self._watcher_factory = watcher_factory

    def seeds(self) -> List[int]:
        if self.cfg.seed is not None:
            return [int(self.cfg.seed)]
        requested_runs = self.cfg.train.runs or len(DEFAULT_SEEDS)
        return DEFAULT_SEEDS[:requested_runs]

    def run(self) -> List[TrainingArtifacts]:
        cfg = self.cfg
        epochs = cfg.train.epochs
        results: List[TrainingArtifacts] = []

        for run_idx, seed in enumerate(self.seeds()):
            set_seed(seed)
            inputs, targets = self._create_dataset(cfg)
            model = self._create_model(cfg)

            watcher = self._watcher_factory() if self._watcher_factory is not None else None
            trainer = RbmTrainer(watcher=watcher, enable_watcher=cfg.train.watch)

            start = time.time()
            error = trainer.train(model, inputs, targets, max_epochs=epochs)
            elapsed = time.time() - start

            artifacts = TrainingArtifacts(
                seed=seed,
                reconstruction_error=error,
                per_epoch_seconds=elapsed / epochs,
                total_hours=elapsed / 3600,
            )
            results.append(artifacts)
            logger.info(
                "Run %d (seed %d): reconstruction error %.5f, %.4f s/epoch",
                run_idx,
                seed,
                error,
                artifacts.per_epoch_seconds,
            )

            if cfg.results_path:
                self._write_record(Path(cfg.results_path), artifacts)

        if len(results) > 1:
            self._summarize_runs(results)
        return results

    def _write_record(self, path: Path, artifacts: TrainingArtifacts) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a") as f:
            f.write(json.dumps(asdict(artifacts)) + "\n")

    def _summarize_runs(self, results: Sequence[TrainingArtifacts]) -> None:
        errors = torch.tensor([r.reconstruction_error for r in results])
        epoch_times = torch.tensor([r.per_epoch_seconds for r in results])
        total_times = torch.tensor([r.total_hours for r in results])
        logger.info(
            "Final reconstruction error: %.5f ± %.5f | Seconds/epoch: %.4f | Hours/total: %.4f",
            errors.mean().item(),
            errors.std().item(),
            epoch_times.mean().item(),
            total_times.mean().item(),
        )
