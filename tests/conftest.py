import pytest

from sqlbuilder import columns, from_, ref, select


@pytest.fixture(scope="function")
def items_statement():
    """A fresh ``select id, title from items`` statement for each test."""
    return select(columns(ref("id"), ref("title")), from_(ref("items")))
