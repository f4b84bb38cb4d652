import pytest

from ec2_reservations import get_ec2_data


@pytest.fixture(autouse=True)
def clear_boto_sessions():
    get_ec2_data.boto_sessions.clear()
    yield
    get_ec2_data.boto_sessions.clear()


@pytest.fixture
def fake_clients(monkeypatch):
    """Route boto_session_getter to FakeEC2 objects registered per profile."""
    clients = {}

    def getter(profile, region):
        return clients[profile]

    monkeypatch.setattr(get_ec2_data, 'boto_session_getter', getter)
    return clients
