"""
Test experiment configuration loading
"""
from rbm_engine.config import load_config


def test_defaults():
    cfg = load_config()
    assert cfg.seed is None
    assert cfg.train.epochs == 10
    assert cfg.train.runs == 1
    assert cfg.train.watch is True
    assert cfg.logging.name == "rbm_engine"


def test_yaml_and_overrides(tmp_path):
    path = tmp_path / "experiment.yaml"
    path.write_text(
        "seed: 3\n"
        "train:\n"
        "  epochs: 4\n"
        "model:\n"
        "  _target_: my_models.BinaryRBM\n"
        "  num_hidden: 16\n"
    )
    cfg = load_config(path, overrides=["train.runs=2", "train.watch=false"])
    assert cfg.seed == 3
    assert cfg.train.epochs == 4
    assert cfg.train.runs == 2
    assert cfg.train.watch is False
    assert cfg.model._target_ == "my_models.BinaryRBM"
    assert cfg.model.num_hidden == 16
