from __future__ import annotations

import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from cardiogram.surface import RecordingSurface  # noqa: E402


@pytest.fixture(autouse=True)
def _cleanup():
    yield
    plt.close("all")
    # setup_logging() hängt Handler an, die auf capsys-Streams zeigen
    logger = logging.getLogger("cardiogram")
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface(200, 100)
