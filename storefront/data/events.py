"""Session hooks that keep lifecycle fields honest.

One before_flush listener, registered on every Session:

* refreshes ``updated_at`` on each modified persistent entity,
* rejects changes to ``id`` / ``created_at`` and to any name a model lists in
  ``_frozen_fields``,
* treats models with a ``_ledger_owner`` as append-only: rows can be inserted,
  and deleted together with their owner, nothing else.
"""
from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from storefront.data.columns import utcnow
from storefront.domain.exceptions import ImmutableFieldError, LedgerViolationError

IMMUTABLE_FIELDS = ("id", "created_at")


def _check_ledger_deletes(session: Session) -> None:
    for obj in session.deleted:
        owner_attr = getattr(obj, "_ledger_owner", None)
        if owner_attr is None:
            continue
        owner = getattr(obj, owner_attr)
        if owner is None or owner not in session.deleted:
            raise LedgerViolationError(
                f"{type(obj).__name__} {obj.id} can only be removed together with its {owner_attr}"
            )


def _stamp_dirty(session: Session) -> None:
    now = utcnow()
    for obj in session.dirty:
        if not session.is_modified(obj):
            continue

        name = type(obj).__name__
        if getattr(obj, "_ledger_owner", None) is not None:
            raise LedgerViolationError(f"{name} {obj.id} is append-only")

        state = inspect(obj)
        for field in IMMUTABLE_FIELDS + tuple(getattr(obj, "_frozen_fields", ())):
            if state.attrs[field].history.has_changes():
                raise ImmutableFieldError(f"{name}.{field} cannot change once stored")

        if hasattr(obj, "updated_at"):
            obj.updated_at = now


@event.listens_for(Session, "before_flush")
def before_flush(session, flush_context, instances):
    _check_ledger_deletes(session)
    _stamp_dirty(session)
