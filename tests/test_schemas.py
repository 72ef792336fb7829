# tests/test_schemas.py
import json

import pytest
from pydantic import ValidationError

from app.schemas.country import CountriesPayload, CountrySummary
from app.schemas.partner import PartnerRecord


def test_country_summary_serializes_null_start_date():
    payload = CountriesPayload(
        countries=[CountrySummary(attendee_count=0, attendees=[], name="Spain", start_date=None)]
    )

    wire = payload.to_wire()

    assert wire == {
        "countries": [
            {"attendeeCount": 0, "attendees": [], "name": "Spain", "startDate": None}
        ]
    }
    assert '"startDate": null' in json.dumps(wire)


def test_countries_payload_round_trips_through_json():
    payload = CountriesPayload(
        countries=[
            CountrySummary(attendee_count=0, attendees=[], name="Spain", start_date=None),
            CountrySummary(
                attendee_count=2,
                attendees=["x@a.com", "y@a.com"],
                name="Ireland",
                start_date="2024-03-01",
            ),
        ]
    )

    restored = CountriesPayload.model_validate(json.loads(json.dumps(payload.to_wire())))

    assert restored.to_wire() == payload.to_wire()
    assert restored.countries[0].start_date is None


def test_partner_record_defaults_and_immutability():
    partner = PartnerRecord.model_validate({"email": "a@a.com", "country": "Peru"})

    assert partner.available_dates == []
    assert partner.first_name == ""

    with pytest.raises(ValidationError):
        partner.email = "b@a.com"
