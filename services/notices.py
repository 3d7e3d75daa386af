# services/notices.py
"""
User-facing notices: the transient, dismissible messages that replace a
failed or refused action. Nothing here is fatal.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Notice:
     title: str
     description: str
     variant: str = "default"  # default, destructive

     @property
     def is_error(self) -> bool:
          return self.variant == "destructive"


def login_required(action: str) -> Notice:
     return Notice(
          title="Login Required",
          description=f"Please login to {action}",
          variant="destructive",
     )


def load_failed(description: str = "Failed to load spaces") -> Notice:
     return Notice(title="Error", description=description, variant="destructive")


def password_mismatch() -> Notice:
     return Notice(
          title="Password Mismatch",
          description="Passwords do not match. Please try again.",
          variant="destructive",
     )
