import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gallery.exhibitions import Painting, Sculpture  # noqa: E402
from gallery.storage import ExhibitionStore  # noqa: E402


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "data" / "exhibitions.json"


@pytest.fixture
def store(store_path):
    return ExhibitionStore(store_path)


@pytest.fixture
def mixed_exhibitions():
    return [
        Painting("Starry Night", "Vincent", 1889, 7850.0),
        Sculpture("The Thinker", "Rodin", 1904, 4630.0),
        Painting("Water Lilies", "Monet", 1906, 6900.5),
    ]


class ScriptedInput:
    """Feeds canned answers to a prompt function and records the prompts."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput
