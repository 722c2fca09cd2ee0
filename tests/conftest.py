from __future__ import annotations

from typing import Iterator, List

import pytest

from optsplit.reporting import reset_failure_reporter


@pytest.fixture(autouse=True)
def _default_reporter() -> Iterator[None]:
    reset_failure_reporter()
    yield
    reset_failure_reporter()


@pytest.fixture
def mixed_tokens() -> List[str]:
    return ["--aaa", "-bc", "ddd", "--ee=fff", "ggg", "--", "--hh", "-ij", "--kk=ll"]
