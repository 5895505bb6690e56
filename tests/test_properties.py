"""Property tests for envelope parsing.

Validates payload mapping, ordering, optional-field absence, idempotence and
round-trip encoding over generated documents.
"""

from __future__ import annotations

from datetime import timezone

from hypothesis import given
from hypothesis import strategies as st

from api_envelope import Envelope, User
from api_envelope.codec.fields import format_timestamp

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

users = st.fixed_dictionaries({"name": st.text(), "email": st.text()})
paginations = st.fixed_dictionaries({"total": st.integers(), "page": st.integers()})
timestamps = st.datetimes(timezones=st.sampled_from([timezone.utc])).map(format_timestamp)


def documents(data):
    return st.fixed_dictionaries(
        {"data": data},
        optional={"pagination": paginations, "createdAt": timestamps, "updatedAt": timestamps},
    )


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

@given(user=users)
def test_payload_only_leaves_metadata_absent(user):
    env = Envelope.from_json({"data": user}, User.from_json)
    assert env.data == User.from_json(user)
    assert env.pagination is None
    assert env.created_at is None
    assert env.updated_at is None


@given(items=st.lists(users, max_size=20))
def test_list_preserves_length_and_order(items):
    env = Envelope.list_from_json({"data": items}, User.from_json)
    assert len(env.data) == len(items)
    assert env.data == tuple(User.from_json(item) for item in items)


@given(raw=documents(users))
def test_single_round_trip(raw):
    assert Envelope.from_json(raw, User.from_json).to_json(User.to_json) == raw


@given(raw=documents(st.lists(users, max_size=5)))
def test_list_round_trip(raw):
    assert Envelope.list_from_json(raw, User.from_json).to_json(User.to_json) == raw


@given(raw=documents(users))
def test_parsing_is_idempotent(raw):
    assert Envelope.from_json(raw, User.from_json) == Envelope.from_json(raw, User.from_json)
