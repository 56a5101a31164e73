import uuid
from datetime import datetime, timedelta, timezone

from gradledeps import audit, models


def test_stamp_created_sets_both_timestamps_to_same_instant():
    p = audit.stamp_created(models.Project(name="x"))
    assert p.created_at is not None
    assert p.created_at == p.updated_at


def test_stamp_updated_leaves_created_at_alone():
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    p = audit.stamp_created(models.Project(name="x"), now=start)
    audit.stamp_updated(p, now=start + timedelta(minutes=5))
    assert p.created_at == start
    assert p.updated_at == start + timedelta(minutes=5)


def test_new_id_is_unique_uuid_text():
    a, b = audit.new_id(), audit.new_id()
    assert a != b
    assert str(uuid.UUID(a)) == a
