# utils/api_client.py
"""
HTTP client for the Adora API.

Wraps the routes a front-end needs (sign-up/in/out, search, listing,
booking) and keeps the signed-in session on the client instance.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

import requests

from services.errors import PasswordMismatchError
from services.notices import Notice, password_mismatch
from services.search_service import SpaceSearchFilters

logger = logging.getLogger(__name__)


class AdoraAPIError(Exception):
     def __init__(self, status_code: int, detail):
          super().__init__(f"{status_code}: {detail}")
          self.status_code = status_code
          self.detail = detail


@dataclass
class ClientSession:
     """Signed-in state held by a client."""
     token: Optional[str] = None
     profile: dict = field(default_factory=dict)

     @property
     def is_authenticated(self) -> bool:
          return bool(self.token)

     @property
     def role(self) -> Optional[str]:
          return self.profile.get("role")


class AdoraClient:
     def __init__(self, base_url: str = "", http=None, timeout: int = 10):
          """
          Args:
               base_url: API root, e.g. https://api.adora.in
               http: requests.Session-compatible object (defaults to a new requests.Session)
               timeout: Per-request timeout in seconds
          """
          self.base_url = base_url.rstrip("/")
          self.http = http if http is not None else requests.Session()
          self.timeout = timeout
          self.session = ClientSession()

     def _headers(self) -> dict:
          if self.session.token:
               return {"Authorization": f"Bearer {self.session.token}"}
          return {}

     def _request(self, method: str, path: str, **kwargs):
          kwargs.setdefault("headers", {}).update(self._headers())
          if isinstance(self.http, requests.Session):
               kwargs.setdefault("timeout", self.timeout)
          response = self.http.request(method, f"{self.base_url}{path}", **kwargs)
          if response.status_code >= 400:
               try:
                    detail = response.json().get("detail") or response.json().get("error")
               except ValueError:
                    detail = response.text
               raise AdoraAPIError(response.status_code, detail)
          if response.status_code == 204 or not response.content:
               return None
          return response.json()

     # ------------------------------------------------------------------
     # Auth
     # ------------------------------------------------------------------

     def sign_up(self, email: str, password: str, confirm_password: str, **profile_fields) -> dict:
          """
          Register and sign in.

          Raises:
               PasswordMismatchError: Before any request when the passwords differ
               AdoraAPIError: If the server rejects the registration
          """
          if password != confirm_password:
               raise PasswordMismatchError()

          payload = {
               "email": email,
               "password": password,
               "confirm_password": confirm_password,
               **profile_fields,
          }
          data = self._request("POST", "/api/auth/signup", json=payload)
          self.session = ClientSession(token=data["access_token"], profile=data["profile"])
          return data

     def sign_in(self, email: str, password: str) -> dict:
          data = self._request("POST", "/api/auth/login", json={"email": email, "password": password})
          self.session = ClientSession(token=data["access_token"], profile=data["profile"])
          return data

     def sign_out(self) -> None:
          if self.session.is_authenticated:
               try:
                    self._request("POST", "/api/auth/logout")
               finally:
                    self.session = ClientSession()

     def me(self) -> dict:
          return self._request("GET", "/api/auth/me")

     # ------------------------------------------------------------------
     # Spaces and bookings
     # ------------------------------------------------------------------

     def search_spaces(self, filters: SpaceSearchFilters, enhanced: bool = True, request_seq: Optional[int] = None) -> dict:
          params = {
               "search": filters.search,
               "state": filters.state,
               "space_type": filters.space_type,
               "price_range": filters.price_range,
          }
          params = {k: v for k, v in params.items() if v}
          if request_seq is not None:
               params["request_seq"] = request_seq
          path = "/api/spaces/search/enhanced" if enhanced else "/api/spaces/search"
          return self._request("GET", path, params=params)

     def create_space(self, **fields) -> dict:
          return self._request("POST", "/api/spaces", json=fields)

     def create_booking(self, **fields) -> dict:
          return self._request("POST", "/api/bookings", json=fields)


def register(client: AdoraClient, email: str, password: str, confirm_password: str, **profile_fields) -> Notice:
     """Sign up and turn the outcome into the notice shown on the registration form."""
     try:
          client.sign_up(email, password, confirm_password, **profile_fields)
     except PasswordMismatchError:
          return password_mismatch()
     except AdoraAPIError as exc:
          return Notice(title="Registration Failed", description=str(exc.detail), variant="destructive")
     except requests.RequestException:
          logger.exception("Registration request failed")
          return Notice(
               title="Error",
               description="An unexpected error occurred. Please try again.",
               variant="destructive",
          )
     return Notice(
          title="Registration Successful",
          description="Welcome to Adora! Please check your email to verify your account.",
     )


def search_fetcher(client: AdoraClient, enhanced: bool = True):
     """Adapt a client to the async fetch callable used by SearchSession."""

     async def fetch(filters: SpaceSearchFilters, request_seq: int):
          data = await asyncio.to_thread(client.search_spaces, filters, enhanced, request_seq)
          return data["spaces"]

     return fetch
