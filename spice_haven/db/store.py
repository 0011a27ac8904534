"""
In-memory data store.

Each entity type lives in its own repository: a dict keyed by a synthetic
integer id plus a counter that only moves forward, so ids are never reused
within a process even after deletes. Nothing here survives a restart; the
default content is rebuilt by spice_haven.db.seed at startup.

FastAPI runs sync endpoints on a thread pool, so every repository serializes
access to its map and counter with a lock.
"""
import logging
import threading
from datetime import date, datetime, timezone
from typing import Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from spice_haven.core.security import hash_token
from spice_haven.schemas.auth import User
from spice_haven.schemas.gallery import GalleryImage, Testimonial
from spice_haven.schemas.menu import MenuCategory, MenuItem
from spice_haven.schemas.reservation import Reservation, ReservationSummary
from spice_haven.schemas.restaurant import AboutSection, RestaurantInfo
from spice_haven.services.reservation_lifecycle import STATUSES, check_transition

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Fields = Union[BaseModel, Mapping]

SINGLETON_ID = 1


class UsernameTakenError(Exception):
    """Raised when creating a user whose username already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username '{username}' is already taken")


def _as_dict(fields: Fields, exclude_unset: bool = False) -> dict:
    if isinstance(fields, BaseModel):
        return fields.model_dump(exclude_unset=exclude_unset)
    return dict(fields)


class Repository(Generic[T]):
    """
    CRUD over one entity type.

    Absence is a normal outcome: lookups return None and delete returns False
    when the id is unknown.
    """

    def __init__(self, model: Type[T], ordered: bool = False):
        self.model = model
        # Sort get_all() by display_order; dicts keep insertion order for ties
        self.ordered = ordered
        self._records: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def _sorted(self, records: List[T]) -> List[T]:
        if self.ordered:
            return sorted(records, key=lambda r: r.display_order)
        return records

    def get_all(self) -> List[T]:
        with self._lock:
            return self._sorted(list(self._records.values()))

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [r for r in self.get_all() if predicate(r)]

    def get_by_id(self, record_id: int) -> Optional[T]:
        return self._records.get(record_id)

    def _build(self, record_id: int, values: dict) -> T:
        return self.model(id=record_id, **values)

    def create(self, fields: Fields) -> T:
        values = _as_dict(fields)
        values.pop("id", None)
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            record = self._build(record_id, values)
            self._records[record_id] = record
        return record

    def _merge(self, existing: T, changes: dict) -> T:
        return existing.model_copy(update=changes)

    def update(self, record_id: int, changes: Fields) -> Optional[T]:
        """Merge the supplied fields onto an existing record; unspecified fields are kept."""
        values = _as_dict(changes, exclude_unset=True)
        values.pop("id", None)
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            updated = self._merge(existing, values)
            self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None


class SingletonRepository(Generic[T]):
    """A record that exists zero or one time under a fixed id."""

    def __init__(self, model: Type[T]):
        self.model = model
        self._record: Optional[T] = None
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return 0 if self._record is None else 1

    def get(self) -> Optional[T]:
        return self._record

    def upsert(self, fields: Fields) -> T:
        """Create the record if absent, otherwise replace every field (id stays the same)."""
        values = _as_dict(fields)
        values.pop("id", None)
        with self._lock:
            self._record = self.model(id=SINGLETON_ID, **values)
        return self._record

    def clear(self) -> bool:
        """Remove the record. Returns False if there was none."""
        with self._lock:
            existed = self._record is not None
            self._record = None
        return existed


class MenuItemRepository(Repository[MenuItem]):

    def __init__(self):
        super().__init__(MenuItem, ordered=True)

    def by_category(self, category_id: int) -> List[MenuItem]:
        return self.find(lambda item: item.category_id == category_id)

    def featured(self) -> List[MenuItem]:
        return self.find(lambda item: item.featured)

    def delete_by_category(self, category_id: int) -> int:
        """Delete every item in a category. Returns the number removed."""
        with self._lock:
            doomed = [i for i, item in self._records.items() if item.category_id == category_id]
            for item_id in doomed:
                del self._records[item_id]
        return len(doomed)


class GalleryRepository(Repository[GalleryImage]):

    def __init__(self):
        super().__init__(GalleryImage, ordered=True)

    def by_category(self, category: str) -> List[GalleryImage]:
        return self.find(lambda image: image.category == category)


class ReservationRepository(Repository[Reservation]):
    """
    Reservations are created as "pending" with a server timestamp.

    status only changes through set_status(); created_at never changes.
    """

    PROTECTED_FIELDS = ("status", "created_at")

    def __init__(self):
        super().__init__(Reservation)

    def _build(self, record_id: int, values: dict) -> Reservation:
        for field in self.PROTECTED_FIELDS:
            values.pop(field, None)
        return Reservation(
            id=record_id,
            status="pending",
            created_at=datetime.now(timezone.utc),
            **values,
        )

    def _merge(self, existing: Reservation, changes: dict) -> Reservation:
        for field in self.PROTECTED_FIELDS:
            changes.pop(field, None)
        return super()._merge(existing, changes)

    def by_status(self, status: str) -> List[Reservation]:
        return self.find(lambda r: r.status == status)

    def set_status(self, reservation_id: int, status: str) -> Optional[Reservation]:
        """
        Move a reservation to a new status.

        Returns None if the reservation doesn't exist. Raises
        InvalidStatusTransitionError if the lifecycle forbids the change.
        """
        with self._lock:
            existing = self._records.get(reservation_id)
            if existing is None:
                return None
            check_transition(existing.status, status)
            updated = existing.model_copy(update={"status": status})
            self._records[reservation_id] = updated

        if existing.status != status:
            logger.info(f"Reservation {reservation_id} status changed: {existing.status} -> {status}")
        return updated

    def summary(self, today: date) -> ReservationSummary:
        """Counts by status plus today's and upcoming (future, not cancelled) bookings."""
        reservations = self.get_all()
        today_str = today.isoformat()
        by_status = {status: 0 for status in STATUSES}
        for r in reservations:
            by_status[r.status] += 1

        return ReservationSummary(
            total=len(reservations),
            by_status=by_status,
            # ISO dates compare correctly as strings
            today=sum(1 for r in reservations if r.date == today_str),
            upcoming=sum(
                1 for r in reservations
                if r.date > today_str and r.status != "cancelled"
            ),
        )


class UserRepository(Repository[User]):
    """Admin accounts. Usernames are unique; the check and insert are atomic."""

    def __init__(self):
        super().__init__(User)

    def get_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            for user in self._records.values():
                if user.username == username:
                    return user
        return None

    def create(self, fields: Fields) -> User:
        values = _as_dict(fields)
        with self._lock:
            if self.get_by_username(values["username"]) is not None:
                raise UsernameTakenError(values["username"])
            return super().create(values)

    def update(self, record_id: int, changes: Fields) -> Optional[User]:
        """Same as Repository.update, but a rename may not take another user's username."""
        values = _as_dict(changes, exclude_unset=True)
        with self._lock:
            new_name = values.get("username")
            if new_name is not None:
                holder = self.get_by_username(new_name)
                if holder is not None and holder.id != record_id:
                    raise UsernameTakenError(new_name)
            return super().update(record_id, values)


class RevokedSessionRegistry:
    """
    Session tokens invalidated by logout, kept until they would have expired.

    Only SHA-256 digests of the tokens are stored.
    """

    def __init__(self):
        self._revoked: Dict[str, datetime] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._revoked)

    def revoke(self, token: str, expires_at: datetime) -> None:
        with self._lock:
            self._revoked[hash_token(token)] = expires_at

    def is_revoked(self, token: str) -> bool:
        return hash_token(token) in self._revoked

    def purge_expired(self, now: Optional[datetime] = None) -> int:
        """Drop entries whose token has expired anyway. Returns the number removed."""
        now = now or datetime.now(timezone.utc)
        with self._lock:
            expired = [h for h, expires_at in self._revoked.items() if expires_at < now]
            for token_hash in expired:
                del self._revoked[token_hash]
        return len(expired)


class DataStore:
    """All repositories for one process. Built once at startup and injected into handlers."""

    def __init__(self):
        self.restaurant_info: SingletonRepository[RestaurantInfo] = SingletonRepository(RestaurantInfo)
        self.about: SingletonRepository[AboutSection] = SingletonRepository(AboutSection)
        self.menu_categories: Repository[MenuCategory] = Repository(MenuCategory, ordered=True)
        self.menu_items = MenuItemRepository()
        self.gallery = GalleryRepository()
        self.testimonials: Repository[Testimonial] = Repository(Testimonial)
        self.reservations = ReservationRepository()
        self.users = UserRepository()
        self.revoked_sessions = RevokedSessionRegistry()

    def counts(self) -> Dict[str, int]:
        return {
            "restaurant_info": len(self.restaurant_info),
            "about": len(self.about),
            "menu_categories": len(self.menu_categories),
            "menu_items": len(self.menu_items),
            "gallery": len(self.gallery),
            "testimonials": len(self.testimonials),
            "reservations": len(self.reservations),
            "users": len(self.users),
        }
