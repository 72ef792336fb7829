# tests/test_partner_sync.py
import pytest

from app.schemas.country import PartnerSyncSummary
from app.services.country_summary import EmptyInputError
from app.services.partner_sync import run_partner_sync
from app.services.partners_client import PartnersClientError, PostResult

DATASET = {
    "partners": [
        {
            "firstName": "Ann",
            "lastName": "Lee",
            "email": "ann@a.com",
            "country": "Ireland",
            "availableDates": ["2024-03-01", "2024-03-02"],
        },
        {
            "firstName": "Bo",
            "lastName": "Kim",
            "email": "bo@a.com",
            "country": "Ireland",
            "availableDates": ["2024-03-02", "2024-03-03"],
        },
        {
            "firstName": "Cy",
            "lastName": "Ray",
            "email": "cy@a.com",
            "country": "Spain",
            "availableDates": ["2024-04-01"],
        },
    ]
}


class FakePartnersClient:
    """
    Stub for PartnersClient recording what gets posted.
    """

    def __init__(self, dataset, post_error: bool = False):
        self.dataset = dataset
        self.post_error = post_error
        self.posted = None

    async def fetch_dataset(self):
        return self.dataset

    async def post_countries(self, payload):
        if self.post_error:
            raise PartnersClientError("Simulated POST failure")
        self.posted = payload
        return PostResult(status_code=200, body={"message": "received"})


@pytest.mark.asyncio
async def test_run_partner_sync_posts_countries_payload():
    client = FakePartnersClient(DATASET)

    summary = await run_partner_sync(client)

    assert isinstance(summary, PartnerSyncSummary)
    assert summary.partners_received == 3
    assert summary.posted is True
    assert summary.result_status == 200
    assert summary.result_body == {"message": "received"}

    assert client.posted == {
        "countries": [
            {
                "attendeeCount": 1,
                "attendees": ["ann@a.com"],
                "name": "Ireland",
                "startDate": "2024-03-01",
            },
            {
                "attendeeCount": 0,
                "attendees": [],
                "name": "Spain",
                "startDate": None,
            },
        ]
    }


@pytest.mark.asyncio
async def test_run_partner_sync_dry_run_skips_post():
    client = FakePartnersClient(DATASET)

    summary = await run_partner_sync(client, dry_run=True)

    assert summary.posted is False
    assert summary.result_status is None
    assert client.posted is None
    assert [c.name for c in summary.countries] == ["Ireland", "Spain"]


@pytest.mark.asyncio
@pytest.mark.parametrize("dataset", [{"partners": []}, {}, {"other": 1}])
async def test_run_partner_sync_empty_dataset_posts_nothing(dataset):
    client = FakePartnersClient(dataset)

    with pytest.raises(EmptyInputError):
        await run_partner_sync(client)
    assert client.posted is None


@pytest.mark.asyncio
async def test_run_partner_sync_malformed_records_raise_client_error():
    client = FakePartnersClient({"partners": [{"firstName": "No email"}]})

    with pytest.raises(PartnersClientError):
        await run_partner_sync(client)
    assert client.posted is None


@pytest.mark.asyncio
async def test_run_partner_sync_propagates_post_failure():
    client = FakePartnersClient(DATASET, post_error=True)

    with pytest.raises(PartnersClientError):
        await run_partner_sync(client)
