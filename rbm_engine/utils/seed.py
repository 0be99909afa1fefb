"""Utility helpers for reproducibility."""

from __future__ import annotations

import os
import random
from typing import Optional

import numpy as np
import torch

from ..training.shuffle import seed_generator


def set_seed(seed: Optional[int]) -> None:
    """Seed python, numpy, torch and the shuffle generator for deterministic runs.

    Args:
        seed: The random seed to apply. When ``None`` the function does nothing.
    """
    if seed is None:
        return

    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    torch.cuda.manual_seed_all(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    seed_generator(seed)
