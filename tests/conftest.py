import pytest
from text_score.config import EvaluationConfig

@pytest.fixture
def sample_text():
    return """
    The James Webb Space Telescope (JWST) has revolutionized our understanding of the cosmos since its launch in 2021.
    As the largest and most powerful space telescope ever built, it has provided unprecedented views of distant galaxies,
    exoplanets, and cosmic phenomena. The telescope's infrared capabilities allow it to peer through cosmic dust and gas,
    revealing previously hidden details about star formation and galaxy evolution.
    """

@pytest.fixture
def sample_summary():
    return """
    The James Webb Space Telescope, launched in 2021, is revolutionizing space observation with its powerful infrared
    capabilities, enabling scientists to study distant galaxies and exoplanets in unprecedented detail.
    """

@pytest.fixture
def identical_text():
    return "this is identical case."

@pytest.fixture
def repeated_text():
    """Text where several unigrams occur more than once"""
    return "it is what it is."

@pytest.fixture
def evaluation_config():
    return EvaluationConfig(metrics=["rouge1", "rouge2", "rouge3"], show_progress=False)
