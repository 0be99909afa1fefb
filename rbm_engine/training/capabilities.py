"""Capability descriptor of a trainable model."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidArgumentError
from .momentum import MomentumState


@dataclass(frozen=True)
class Capabilities:
    shuffle: bool = False
    momentum: bool = False
    init_weights: bool = False
    free_energy: bool = False


NO_CAPABILITIES = Capabilities()


def resolve_capabilities(model: object) -> Capabilities:
    """Return the capabilities declared by ``model``.

    Models without a ``capabilities`` attribute support none of the optional
    behaviours.
    """
    capabilities = getattr(model, "capabilities", None)
    if capabilities is None:
        return NO_CAPABILITIES
    if not isinstance(capabilities, Capabilities):
        raise InvalidArgumentError(
            f"{type(model).__name__}.capabilities must be a Capabilities instance, "
            f"got {type(capabilities).__name__}"
        )
    return capabilities


def check_model(model: object, capabilities: Capabilities) -> None:
    """Check the attributes ``model`` needs for its declared capabilities."""
    name = type(model).__name__
    for attribute in ("batch_size", "trainer_factory"):
        if not hasattr(model, attribute):
            raise InvalidArgumentError(f"{name} has no '{attribute}' attribute")

    for flag in ("init_weights", "free_energy"):
        if getattr(capabilities, flag) and not callable(getattr(model, flag, None)):
            raise InvalidArgumentError(
                f"{name} declares the '{flag}' capability but has no callable '{flag}'"
            )

    if capabilities.momentum and not isinstance(getattr(model, "momentum", None), MomentumState):
        raise InvalidArgumentError(
            f"{name} declares the 'momentum' capability but its 'momentum' "
            f"attribute is not a MomentumState"
        )
