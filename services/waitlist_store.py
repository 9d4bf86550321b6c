"""Waitlist table access through the Supabase REST API"""
from dataclasses import asdict, dataclass

from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod

from config.database import DEFAULT_TABLE
from utils.logger import log_error

WEBSITE_SOURCE = 'website'


class WaitlistStoreError(Exception):
    """The store rejected a request or answered with something unusable"""


@dataclass(frozen=True)
class Submission:
    """A waitlist signup as written to the table"""
    email: str
    user_agent: str
    referrer: str
    source: str = WEBSITE_SOURCE

    def to_record(self):
        return asdict(self)


class WaitlistStore:
    def __init__(self, client, table: str = DEFAULT_TABLE):
        self.client = client
        self.table = table

    def email_exists(self, email: str) -> bool:
        """Check whether the exact email is already on the waitlist"""
        try:
            existing = self.client.table(self.table).select('email').eq('email', email).execute()
        except APIError as e:
            raise WaitlistStoreError(f"Database error: {e.message or 'Failed to check email'}") from e

        if not isinstance(existing.data, list):
            raise WaitlistStoreError("Database error: unexpected response to email lookup")
        return len(existing.data) > 0

    def add(self, submission: Submission) -> None:
        """Insert a signup; the store is asked not to echo the row back"""
        try:
            self.client.table(self.table).insert(
                submission.to_record(),
                returning=ReturnMethod.minimal
            ).execute()
        except APIError as e:
            message = e.message or 'Failed to add email'
            log_error(f"Waitlist insert rejected for {submission.email}: {message}")
            raise WaitlistStoreError(f"Database error: {message}") from e
