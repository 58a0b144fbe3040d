import pytest
from text_score.config import EvaluationConfig
from text_score.exceptions import InvalidArgumentError


def test_evaluation_config_defaults():
    """Test that an EvaluationConfig can be created without arguments"""
    config = EvaluationConfig()
    assert config.metrics == ["rouge1", "rouge2"]
    assert config.show_progress is True
    config.validate()  # Should not raise


def test_evaluation_config_default_metrics_not_shared():
    """Test that each config gets its own metrics list"""
    first = EvaluationConfig()
    second = EvaluationConfig()
    first.metrics.append("rouge3")
    assert second.metrics == ["rouge1", "rouge2"]


def test_evaluation_config_orders(evaluation_config):
    """Test that metric names map to n-gram orders in order"""
    assert evaluation_config.orders() == [1, 2, 3]
    assert EvaluationConfig(metrics=["rouge4", "rouge1"]).orders() == [4, 1]


def test_evaluation_config_empty_metrics():
    """Test validation for an empty metric list"""
    config = EvaluationConfig(metrics=[])
    with pytest.raises(InvalidArgumentError, match="metrics must not be empty"):
        config.validate()


def test_evaluation_config_invalid_metrics():
    """Test validation for unsupported metric names"""
    config = EvaluationConfig(metrics=["rouge1", "rougeL"])
    with pytest.raises(InvalidArgumentError, match="Invalid metrics"):
        config.validate()

    # InvalidArgumentError is a ValueError
    with pytest.raises(ValueError):
        config.orders()
