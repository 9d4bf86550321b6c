from unittest.mock import MagicMock

import pytest

from services.waitlist_service import WaitlistController
from services.waitlist_store import WaitlistStore
from utils.client_context import StaticClientContext


@pytest.fixture
def supabase_client():
    """Supabase client double: lookups find nothing, inserts succeed"""
    client = MagicMock()
    table = client.table.return_value
    table.select.return_value.eq.return_value.execute.return_value = MagicMock(data=[])
    table.insert.return_value.execute.return_value = MagicMock(data=[])
    return client


@pytest.fixture
def store(supabase_client):
    return WaitlistStore(supabase_client)


@pytest.fixture
def client_context():
    return StaticClientContext(user_agent='Mozilla/5.0 (test)', referrer='https://news.example.com/')


@pytest.fixture
def controller(store, client_context):
    return WaitlistController(store, client_context)
