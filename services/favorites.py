# services/favorites.py
"""
Client-side favorites and contact actions.

Favorites live in memory for one client session only; nothing is persisted
or sent to the server. Both actions require a signed-in session and
otherwise return a login notice without changing anything.
"""
from typing import Iterable, List, Optional

from .notices import Notice, login_required


class FavoritesStore:
     def __init__(self, session, initial: Iterable = ()):
          """
          Args:
               session: Any object exposing an ``is_authenticated`` attribute
               initial: Space ids already favorited
          """
          self._session = session
          self._ids: List = list(dict.fromkeys(initial))

     @property
     def ids(self) -> List:
          return list(self._ids)

     def __contains__(self, space_id) -> bool:
          return space_id in self._ids

     def __len__(self) -> int:
          return len(self._ids)

     def toggle(self, space_id) -> Optional[Notice]:
          """Add or remove a space id. Returns a notice when the action is refused."""
          if not getattr(self._session, "is_authenticated", False):
               return login_required("save favorites")

          if space_id in self._ids:
               self._ids.remove(space_id)
          else:
               self._ids.append(space_id)
          return None


def contact_owner(session, space: dict) -> Notice:
     """Build the notice shown when a visitor asks to contact a space owner."""
     if not getattr(session, "is_authenticated", False):
          return login_required("contact space owners")

     owner = space.get("owner") or {}
     name = f"{owner.get('first_name') or ''} {owner.get('last_name') or ''}".strip() or "the owner"
     return Notice(title="Contact Owner", description=f"Contacting {name}")
