import pytest

from chain_ik import build_chain


@pytest.fixture
def two_link_chain():
    """Two 100-long links on the origin (reach 200)."""
    return build_chain((0.0, 0.0), [100.0, 100.0])


@pytest.fixture
def three_link_chain():
    """Links of 200, 100 and 150 on the origin (reach 450)."""
    return build_chain((0.0, 0.0), [200.0, 100.0, 150.0])
