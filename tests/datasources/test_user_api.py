"""
Tests for the user and booking ledger
"""

from types import SimpleNamespace

import pytest

from spacetrips.database.store import FindOrCreateResult
from spacetrips.datasources.user import UserAPI


def found(row, was_created=False):
    return FindOrCreateResult(row=row, was_created=was_created)


@pytest.fixture
def user_api(mock_store, auth_user):
    return UserAPI(store=mock_store, user=auth_user)


@pytest.fixture
def anonymous_user_api(mock_store):
    return UserAPI(store=mock_store, user=None)


class TestFindOrCreateUser:
    @pytest.mark.asyncio
    async def test_returns_none_for_invalid_emails(self, user_api, mock_store):
        assert await user_api.find_or_create_user("boo!") is None
        mock_store.users.find_or_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_looks_up_or_creates_user_in_store(self, user_api, mock_store):
        row = SimpleNamespace(id=1, email="a@a.a")
        mock_store.users.find_or_create.return_value = found(row, was_created=True)

        res = await user_api.find_or_create_user("a@a.a")

        assert res is row
        mock_store.users.find_or_create.assert_awaited_once_with(where={"email": "a@a.a"})

    @pytest.mark.asyncio
    async def test_returns_none_if_no_user_found_or_created(self, user_api, mock_store):
        mock_store.users.find_or_create.return_value = None

        assert await user_api.find_or_create_user("a@a.a") is None

    @pytest.mark.asyncio
    async def test_falls_back_to_context_email(self, mock_store):
        row = SimpleNamespace(id=3, email="crew@spacex.com")
        mock_store.users.find_or_create.return_value = found(row)
        api = UserAPI(store=mock_store, user=SimpleNamespace(id=3, email="crew@spacex.com"))

        assert await api.find_or_create_user() is row
        mock_store.users.find_or_create.assert_awaited_once_with(
            where={"email": "crew@spacex.com"}
        )

    @pytest.mark.asyncio
    async def test_no_email_and_no_user(self, anonymous_user_api, mock_store):
        assert await anonymous_user_api.find_or_create_user() is None
        mock_store.users.find_or_create.assert_not_called()


class TestBookTrip:
    @pytest.mark.asyncio
    async def test_calls_store_creator_and_returns_result(self, user_api, mock_store):
        trip = SimpleNamespace(id=10, user_id=1, launch_id=1)
        mock_store.trips.find_or_create.return_value = found(trip, was_created=True)

        res = await user_api.book_trip(1)

        assert res is trip
        mock_store.trips.find_or_create.assert_awaited_once_with(
            where={"launch_id": 1, "user_id": 1}
        )

    @pytest.mark.asyncio
    async def test_rebooking_returns_existing_trip(self, user_api, mock_store):
        trip = SimpleNamespace(id=10, user_id=1, launch_id=1)
        mock_store.trips.find_or_create.side_effect = [
            found(trip, was_created=True),
            found(trip, was_created=False),
        ]

        first = await user_api.book_trip(1)
        second = await user_api.book_trip(1)

        assert first is second is trip

    @pytest.mark.asyncio
    async def test_requires_a_user(self, anonymous_user_api, mock_store):
        assert await anonymous_user_api.book_trip(1) is None
        mock_store.trips.find_or_create.assert_not_called()


class TestBookTrips:
    @pytest.mark.asyncio
    async def test_returns_multiple_lookups_from_book_trip(self, user_api, mock_store):
        heya = SimpleNamespace(launch_id=1)
        okay = SimpleNamespace(launch_id=2)
        mock_store.trips.find_or_create.side_effect = [found(heya), found(okay)]

        res = await user_api.book_trips([1, 2])

        assert res == [heya, okay]

    @pytest.mark.asyncio
    async def test_skips_launches_that_fail_to_book(self, user_api, mock_store):
        okay = SimpleNamespace(launch_id=2)
        mock_store.trips.find_or_create.side_effect = [None, found(okay)]

        assert await user_api.book_trips([1, 2]) == [okay]

    @pytest.mark.asyncio
    async def test_books_in_input_order(self, user_api, mock_store):
        mock_store.trips.find_or_create.side_effect = lambda where: found(
            SimpleNamespace(launch_id=where["launch_id"])
        )

        res = await user_api.book_trips([3, 1, 2])

        assert [trip.launch_id for trip in res] == [3, 1, 2]


class TestCancelTrip:
    @pytest.mark.asyncio
    async def test_calls_store_destroy_and_returns_result(self, user_api, mock_store):
        mock_store.trips.destroy.return_value = 1

        assert await user_api.cancel_trip(1) is True
        mock_store.trips.destroy.assert_awaited_once_with(where={"launch_id": 1, "user_id": 1})

    @pytest.mark.asyncio
    async def test_nothing_to_cancel(self, user_api, mock_store):
        mock_store.trips.destroy.return_value = 0

        assert await user_api.cancel_trip(1) is False

    @pytest.mark.asyncio
    async def test_requires_a_user(self, anonymous_user_api, mock_store):
        assert await anonymous_user_api.cancel_trip(1) is False
        mock_store.trips.destroy.assert_not_called()


class TestGetLaunchIdsByUser:
    @pytest.mark.asyncio
    async def test_looks_up_launches_by_user(self, user_api, mock_store):
        mock_store.trips.find_all.return_value = [
            SimpleNamespace(launch_id=1),
            SimpleNamespace(launch_id=2),
        ]

        assert await user_api.get_launch_ids_by_user() == [1, 2]
        mock_store.trips.find_all.assert_awaited_once_with(where={"user_id": 1})

    @pytest.mark.asyncio
    async def test_returns_empty_list_if_nothing_found(self, user_api, mock_store):
        mock_store.trips.find_all.return_value = []

        assert await user_api.get_launch_ids_by_user() == []


class TestIsBookedOnLaunch:
    @pytest.mark.asyncio
    async def test_booked(self, user_api, mock_store):
        mock_store.trips.find_all.return_value = [SimpleNamespace(launch_id=1)]

        assert await user_api.is_booked_on_launch(1) is True
        mock_store.trips.find_all.assert_awaited_once_with(where={"user_id": 1, "launch_id": 1})

    @pytest.mark.asyncio
    async def test_not_booked(self, user_api, mock_store):
        mock_store.trips.find_all.return_value = []

        assert await user_api.is_booked_on_launch(1) is False

    @pytest.mark.asyncio
    async def test_anonymous_is_never_booked(self, anonymous_user_api, mock_store):
        assert await anonymous_user_api.is_booked_on_launch(1) is False
        mock_store.trips.find_all.assert_not_called()
