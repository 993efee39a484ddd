from datetime import date, datetime, timezone

import pytest

from credit_ledger.modules.records import InvalidSortFieldError, RecordQuery


def at(day: int, hour: int = 12) -> datetime:
    return datetime(2024, 3, day, hour, 0, tzinfo=timezone.utc)


@pytest.fixture
async def history(make_user, make_record):
    await make_user("user-1")
    await make_user("user-2")
    return [
        await make_record("user-1", "addition", user_balance=99, response="3", created_at=at(1)),
        await make_record("user-1", "division", user_balance=97, response="3.5", created_at=at(2)),
        await make_record("user-1", "square_root", user_balance=94, response="4", created_at=at(3)),
        await make_record("user-1", "random_string", user_balance=89, response="AbC123xYz9", created_at=at(4)),
        await make_record("user-2", "addition", user_balance=10, response="42", created_at=at(2)),
    ]


async def test_create_record_stamps_identity_and_time(make_user, make_record) -> None:
    await make_user("user-1")

    record = await make_record("user-1", "addition", user_balance=99, response="3")

    assert record.id
    assert record.deleted is False
    assert record.amount == 1
    assert record.created_at is not None


async def test_listing_only_returns_own_visible_records(history, record_service) -> None:
    page = await record_service.get_user_records(RecordQuery(user_id="user-1"))

    assert page.total_count == 4
    assert [r.operation_response for r in page.records] == ["AbC123xYz9", "4", "3.5", "3"]
    assert {r.user_id for r in page.records} == {"user-1"}
    assert page.records[-1].operation_type == "addition"


async def test_soft_deleted_records_disappear(history, record_service) -> None:
    await record_service.soft_delete_record(history[0].id)

    page = await record_service.get_user_records(RecordQuery(user_id="user-1"))

    assert page.total_count == 3
    assert history[0].id not in {r.id for r in page.records}


async def test_soft_delete_of_unknown_record_is_a_noop(history, record_service) -> None:
    await record_service.soft_delete_record("does-not-exist")

    page = await record_service.get_user_records(RecordQuery(user_id="user-1"))
    assert page.total_count == 4


async def test_pagination_window_and_total(history, record_service) -> None:
    page = await record_service.get_user_records(
        RecordQuery(user_id="user-1", limit=3, offset=3, sort_by="created_at", sort_order="asc")
    )

    assert page.total_count == 4
    assert [r.operation_response for r in page.records] == ["AbC123xYz9"]


async def test_sorting_by_balance(history, record_service) -> None:
    page = await record_service.get_user_records(
        RecordQuery(user_id="user-1", sort_by="user_balance", sort_order="asc")
    )

    assert [r.user_balance for r in page.records] == [89, 94, 97, 99]


async def test_invalid_sort_field(history, record_service) -> None:
    with pytest.raises(InvalidSortFieldError):
        await record_service.get_user_records(RecordQuery(user_id="user-1", sort_by="deleted"))


async def test_filter_by_operation_id(history, record_service) -> None:
    division_id = history[1].operation_id

    page = await record_service.get_user_records(RecordQuery(user_id="user-1", operation_type=division_id))

    assert page.total_count == 1
    assert page.records[0].operation_type == "division"


async def test_date_range_covers_whole_days(history, record_service) -> None:
    page = await record_service.get_user_records(
        RecordQuery(user_id="user-1", start_date=date(2024, 3, 2), end_date=date(2024, 3, 3))
    )

    assert page.total_count == 2
    assert {r.operation_response for r in page.records} == {"3.5", "4"}


async def test_one_sided_date_range_is_ignored(history, record_service) -> None:
    page = await record_service.get_user_records(RecordQuery(user_id="user-1", start_date=date(2024, 3, 4)))

    assert page.total_count == 4


@pytest.mark.parametrize(
    ("search", "expected"),
    [
        ("abc123", {"AbC123xYz9"}),
        ("SQUARE", {"4"}),
        ("3.5", {"3.5"}),
        ("nothing-matches", set()),
    ],
)
async def test_search_is_case_insensitive_substring(history, record_service, search, expected) -> None:
    page = await record_service.get_user_records(RecordQuery(user_id="user-1", search=search))

    assert {r.operation_response for r in page.records} == expected
    assert page.total_count == len(expected)
