import os
import sys

import pytest

# Headless SDL so scenes can be exercised without a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure the library src roots are importable without an install
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
for src in ("packages/lib/quiz/src", "packages/lib/screens/src"):
    path = os.path.join(REPO_ROOT, src)
    if path not in sys.path:
        sys.path.insert(0, path)

import numpy as np  # noqa: E402
from lib_quiz import QuestionGenerator, QuizConfig  # noqa: E402
from lib_screens import create_manager  # noqa: E402


@pytest.fixture()
def rng():
    return np.random.default_rng(1234)


@pytest.fixture()
def generator(rng):
    return QuestionGenerator(rng)


@pytest.fixture()
def config():
    return QuizConfig()


@pytest.fixture()
def manager():
    mgr = create_manager(rng=7)
    mgr.initialize()
    yield mgr
    mgr.shutdown()

