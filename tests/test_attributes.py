from datetime import date, datetime, timezone

import pytest

from nylas_calendar.core.attributes import Attributes
from nylas_calendar.resources import Event, EventParticipant

from .conftest import FakeConnection


@pytest.fixture
def parent():
    return Event(FakeConnection())


def test_json_key_defaults_to_model_key():
    attr = Attributes.String("title")
    assert attr.json_key == "title"
    attr = Attributes.String("email_address", json_key="emailAddress")
    assert attr.json_key == "emailAddress"


@pytest.mark.parametrize(
    "attr,expected",
    [
        (Attributes.String("x"), ""),
        (Attributes.StringList("x"), []),
        (Attributes.Boolean("x"), False),
        (Attributes.Number("x"), None),
        (Attributes.Date("x"), None),
        (Attributes.DateTime("x"), None),
        (Attributes.Object("x"), None),
        (Attributes.RawObject("x"), None),
        (Attributes.Collection("x", item_class=EventParticipant), []),
    ],
)
def test_from_json_null_gives_zero_value(attr, expected, parent):
    assert attr.from_json(None, parent) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(12, 12), (1.5, 1.5), ("42", 42), ("4.2", 4.2), ("abc", None), (True, None), ([], None)],
)
def test_number_from_json(value, expected, parent):
    assert Attributes.Number("x").from_json(value, parent) == expected


@pytest.mark.parametrize(
    "value,expected", [(True, True), ("true", True), (False, False), ("false", False), (1, False)]
)
def test_boolean_from_json(value, expected, parent):
    assert Attributes.Boolean("x").from_json(value, parent) is expected


def test_date_round_trip(parent):
    attr = Attributes.Date("x")
    value = attr.from_json("2021-06-01", parent)
    assert value == date(2021, 6, 1)
    assert attr.to_json(value) == "2021-06-01"


def test_date_with_time(parent):
    attr = Attributes.Date("x")
    value = attr.from_json("2021-06-01T10:30:00+00:00", parent)
    assert value == datetime(2021, 6, 1, 10, 30, tzinfo=timezone.utc)
    assert attr.to_json(value) == "2021-06-01T10:30:00+00:00"


def test_date_to_json_rejects_non_dates():
    with pytest.raises(TypeError):
        Attributes.Date("x").to_json("2021-06-01")


def test_datetime_round_trip(parent):
    attr = Attributes.DateTime("x")
    value = attr.from_json(1409594400.25, parent)
    assert value == datetime(2014, 9, 1, 18, 0, 0, 250000, tzinfo=timezone.utc)
    assert attr.to_json(value) == pytest.approx(1409594400.25)


def test_datetime_to_json_rejects_non_datetimes():
    with pytest.raises(TypeError):
        Attributes.DateTime("x").to_json(1409594400)
    with pytest.raises(TypeError):
        Attributes.DateTime("x").to_json(date(2021, 6, 1))
    assert Attributes.DateTime("x").to_json(None) is None


def test_collection_from_json(parent):
    attr = Attributes.Collection("participants", item_class=EventParticipant)
    participants = attr.from_json([{"email": "a@example.com"}, {"email": "b@example.com"}], parent)
    assert [p.email for p in participants] == ["a@example.com", "b@example.com"]
    assert all(p.connection is parent.connection for p in participants)
    # fails soft on anything but a list
    assert attr.from_json({"email": "a@example.com"}, parent) == []


def test_collection_to_json_accepts_models_and_plain_values(parent):
    attr = Attributes.Collection("participants", item_class=EventParticipant)
    participant = EventParticipant(parent.connection, {"email": "a@example.com"})
    assert attr.to_json([participant, "raw"]) == [
        {"name": "a@example.com", "email": "a@example.com", "status": None},
        "raw",
    ]
    assert attr.to_json(None) == []


def test_collection_requires_item_class():
    with pytest.raises(TypeError):
        Attributes.Collection("participants")


def test_object_with_item_class(parent):
    attr = Attributes.Object("organizer", item_class=EventParticipant)
    organizer = attr.from_json({"email": "a@example.com", "status": "yes"}, parent)
    assert isinstance(organizer, EventParticipant)
    assert organizer.status == "yes"
    assert attr.to_json(organizer)["email"] == "a@example.com"


def test_raw_object_is_copied(parent):
    when = {"start_time": 1, "end_time": 2}
    value = Attributes.RawObject("when").from_json(when, parent)
    assert value == when
    assert value is not when
