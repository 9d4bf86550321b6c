"""Waitlist submission workflow: duplicate check, insert, result modal"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from services.waitlist_store import Submission, WaitlistStore
from utils.client_context import ClientContext, resolve_referrer
from utils.logger import log_error, log_info


class SubmissionOutcome(Enum):
    SUCCESS = 'success'
    DUPLICATE = 'duplicate'
    ERROR = 'error'


class AlreadySubscribedError(Exception):
    """Email already exists on the waitlist"""


@dataclass
class Modal:
    visible: bool = False
    title: str = ''
    message: str = ''

    def to_dict(self):
        return {'visible': self.visible, 'title': self.title, 'message': self.message}


MODAL_CONTENT = {
    SubmissionOutcome.SUCCESS: (
        'Successfully Added!',
        "Welcome to Interview Lens! You're now on our exclusive waitlist and will be the first to know when we launch."
    ),
    SubmissionOutcome.DUPLICATE: (
        'Already Subscribed!',
        "You're already on our waitlist! We'll keep you updated."
    ),
    SubmissionOutcome.ERROR: (
        'Submission Error',
        'Could not add your email at this time. Please try again later.'
    ),
}


class WaitlistController:
    """
    Holds the signup form state and runs submissions against the store.

    Only one submission runs at a time: `submit` is ignored while another is
    in flight or while the email field is empty.
    """

    def __init__(self, store: WaitlistStore, client_context: ClientContext):
        self.store = store
        self.client_context = client_context
        self.email_input = ''
        self.is_submitting = False
        self.modal = Modal()

    def set_email(self, value: str):
        self.email_input = value

    def submit(self, email: Optional[str] = None) -> Optional[SubmissionOutcome]:
        """
        Submit the current email.

        Returns the outcome, or None when the submission was ignored.
        """
        if self.is_submitting:
            return None
        if email is not None:
            if not email:
                return None
            self.email_input = email
        if not self.email_input:
            return None

        email = self.email_input
        self.is_submitting = True
        try:
            if self.store.email_exists(email):
                raise AlreadySubscribedError('Email already exists')

            self.store.add(Submission(
                email=email,
                user_agent=self.client_context.user_agent(),
                referrer=resolve_referrer(self.client_context.referrer())
            ))

            outcome = SubmissionOutcome.SUCCESS
            self.email_input = ''
            log_info(f"Email added to waitlist: {email}")
        except AlreadySubscribedError as e:
            log_info(f"Waitlist submission for {email}: {e}")
            outcome = SubmissionOutcome.DUPLICATE
        except Exception as e:
            log_error("Waitlist submission error", e)
            outcome = SubmissionOutcome.ERROR
        finally:
            self.is_submitting = False

        self._show(outcome)
        return outcome

    def dismiss(self):
        """Hide the modal, keeping its last content"""
        self.modal.visible = False

    def state(self):
        return {
            'email': self.email_input,
            'is_submitting': self.is_submitting,
            'modal': self.modal.to_dict()
        }

    def _show(self, outcome: SubmissionOutcome):
        title, message = MODAL_CONTENT[outcome]
        self.modal = Modal(visible=True, title=title, message=message)
