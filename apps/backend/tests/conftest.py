from datetime import datetime
from typing import Callable

import pytest

from .helpers import make_clock


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return make_clock()
