from textwrap import dedent

import pytest


@pytest.fixture
def users_query():
    return dedent(
        """
        SELECT *
        FROM users
        WHERE id = :id
        AND name = :name
        """
    )


@pytest.fixture
def users_query_positional():
    return dedent(
        """
        SELECT *
        FROM users
        WHERE id = $1
        AND name = $2
        """
    )


@pytest.fixture
def substring_query():
    return (
        "SELECT * FROM users "
        "WHERE (name = :name OR name in :names OR ns = :namespace) "
        "AND (username = :username OR username in :usernames)"
    )
