from datetime import datetime, timezone

RECORDS_URL = "/api/records"


async def seed(make_user, make_record, count: int = 3):
    await make_user("user-1")
    return [
        await make_record(
            "user-1",
            "addition",
            user_balance=100 - i,
            response=str(i),
            created_at=datetime(2024, 5, 1 + i, tzinfo=timezone.utc),
        )
        for i in range(count)
    ]


async def test_user_id_is_required(client) -> None:
    response = await client.get(RECORDS_URL)

    assert response.status_code == 400
    assert response.json() == {"message": "userId is required"}


async def test_list_returns_page_metadata(client, make_user, make_record) -> None:
    await seed(make_user, make_record, count=3)

    response = await client.get(RECORDS_URL, params={"userId": "user-1", "page": 1, "rowsPerPage": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["totalCount"] == 3
    assert body["totalPages"] == 2
    assert body["hasNextPage"] is True
    assert body["page"] == 1
    assert body["pageSize"] == 2
    assert body["sortBy"] == "created_at"
    assert body["sortOrder"] == "desc"
    assert [item["operation_response"] for item in body["items"]] == ["2", "1"]
    item = body["items"][0]
    assert item["operation_type"] == "addition"
    assert item["deleted"] is False
    assert item["date"] == item["created_at"]


async def test_last_page(client, make_user, make_record) -> None:
    await seed(make_user, make_record, count=3)

    response = await client.get(
        RECORDS_URL,
        params={"userId": "user-1", "page": 2, "rowsPerPage": 2, "sortBy": "user_balance", "sortOrder": "asc"},
    )

    body = response.json()
    assert body["hasNextPage"] is False
    assert [item["user_balance"] for item in body["items"]] == [100]


async def test_empty_listing(client) -> None:
    response = await client.get(RECORDS_URL, params={"userId": "nobody"})

    body = response.json()
    assert response.status_code == 200
    assert (body["items"], body["totalCount"], body["totalPages"], body["hasNextPage"]) == ([], 0, 0, False)


async def test_invalid_sort_field(client) -> None:
    response = await client.get(RECORDS_URL, params={"userId": "user-1", "sortBy": "password"})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid sortBy: password"}


async def test_invalid_page(client) -> None:
    response = await client.get(RECORDS_URL, params={"userId": "user-1", "page": 0})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid or missing page"}


async def test_filters_are_forwarded(client, make_user, make_record) -> None:
    records = await seed(make_user, make_record, count=3)

    response = await client.get(
        RECORDS_URL,
        params={
            "userId": "user-1",
            "startDate": "2024-05-02",
            "endDate": "2024-05-03",
            "operationId": records[0].operation_id,
        },
    )

    assert [item["operation_response"] for item in response.json()["items"]] == ["2", "1"]


async def test_search_string(client, make_user, make_record) -> None:
    await seed(make_user, make_record, count=3)

    response = await client.get(RECORDS_URL, params={"userId": "user-1", "searchString": "ADDITION"})

    assert response.json()["totalCount"] == 3


async def test_delete_requires_both_ids(client) -> None:
    response = await client.delete(RECORDS_URL, params={"userId": "user-1"})

    assert response.status_code == 400
    assert response.json() == {"message": "Both userId and recordId are required"}


async def test_delete_hides_record(client, make_user, make_record) -> None:
    records = await seed(make_user, make_record, count=2)

    response = await client.delete(RECORDS_URL, params={"userId": "user-1", "recordId": records[0].id})

    assert response.status_code == 200
    assert response.json() == {"message": "Record soft deleted successfully"}
    listing = (await client.get(RECORDS_URL, params={"userId": "user-1"})).json()
    assert [item["id"] for item in listing["items"]] == [records[1].id]


async def test_delete_unknown_record_succeeds(client) -> None:
    response = await client.delete(RECORDS_URL, params={"userId": "user-1", "recordId": "missing"})

    assert response.status_code == 200


async def test_timestamp_bounds_cover_their_whole_days(client, make_user, make_record) -> None:
    await seed(make_user, make_record, count=3)

    response = await client.get(
        RECORDS_URL,
        params={
            "userId": "user-1",
            "startDate": "2024-05-02T10:30:00.000Z",
            "endDate": "2024-05-03T08:00:00.000Z",
        },
    )

    assert response.status_code == 200
    assert [item["operation_response"] for item in response.json()["items"]] == ["2", "1"]
