import pytest

from .factories import make_team, make_user


@pytest.fixture
def user():
    return make_user()


@pytest.fixture
def other_user():
    return make_user(email="other@example.com", name="Other")


@pytest.fixture
def team(other_user):
    return make_team(leader=other_user.id, created_by=other_user.id, users=[other_user])
