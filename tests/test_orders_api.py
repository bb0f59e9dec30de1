"""
HTTP surface tests: the FastAPI app with in-memory repositories swapped in
through dependency overrides.
"""
import pytest

from table_order.api.errors import SERVER_ERROR_MESSAGE
from table_order.core.errors import ConnectionFailure, CreateFailure, DetailFailure
from tests.conftest import COOK_MAX, COOK_MIN

ORDER_FIELDS = {"order_id", "table_number", "cook_time", "menu", "created_at"}


# ─── Create ────────────────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_create_returns_enriched_order(client):
    r = await client.post("/table/3/order", json={"menu_id": 5})

    assert r.status_code == 200, r.text
    order = r.json()["order"]
    assert set(order) == ORDER_FIELDS
    assert order["table_number"] == 3
    assert order["menu"] == {"id": 5, "name": "焼き鳥"}
    assert COOK_MIN <= order["cook_time"] <= COOK_MAX
    assert order["created_at"].endswith("+00:00")


@pytest.mark.asyncio
@pytest.mark.parametrize("table_number", [0, 101])
async def test_create_rejects_bad_table(client, order_repo, table_number):
    r = await client.post(f"/table/{table_number}/order", json={"menu_id": 5})
    assert r.status_code == 400
    assert r.json() == {"error": True, "message": "table_number must be in range of 1 to 100"}
    assert order_repo.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("menu_id", [0, 11])
async def test_create_rejects_bad_menu(client, order_repo, menu_id):
    r = await client.post("/table/3/order", json={"menu_id": menu_id})
    assert r.status_code == 400
    assert r.json() == {"error": True, "message": "menu_id must be in range of 1 to 10"}
    assert order_repo.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"menu_id": "ramen"}])
async def test_create_rejects_malformed_body(client, order_repo, body):
    r = await client.post("/table/3/order", json=body)
    assert r.status_code == 400
    assert r.json()["error"] is True
    assert "menu_id" in r.json()["message"]
    assert order_repo.calls == []


@pytest.mark.asyncio
async def test_create_storage_failure_hides_cause(client, order_repo):
    order_repo.fail_with = CreateFailure(RuntimeError("violates constraint orders_pk SECRET"))

    r = await client.post("/table/3/order", json={"menu_id": 5})

    assert r.status_code == 500
    assert r.json() == {"error": True, "message": SERVER_ERROR_MESSAGE}
    assert "SECRET" not in r.text


@pytest.mark.asyncio
async def test_create_menu_failure_is_server_error(client, menu_repo):
    menu_repo.fail_with = ConnectionFailure(OSError("pool timed out"))
    r = await client.post("/table/3/order", json={"menu_id": 5})
    assert r.status_code == 500
    assert r.json()["message"] == SERVER_ERROR_MESSAGE


# ─── List ──────────────────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_list_orders_for_table(client):
    for menu_id in (1, 2, 3):
        await client.post("/table/8/order", json={"menu_id": menu_id})
    await client.post("/table/9/order", json={"menu_id": 4})

    r = await client.get("/table/8/order")

    assert r.status_code == 200
    orders = r.json()["orders"]
    assert [o["menu"]["id"] for o in orders] == [1, 2, 3]
    assert all(set(o) == ORDER_FIELDS for o in orders)


@pytest.mark.asyncio
async def test_list_empty_table(client):
    r = await client.get("/table/55/order")
    assert r.status_code == 200
    assert r.json() == {"orders": []}


@pytest.mark.asyncio
async def test_list_pagination_query(client, order_repo):
    for _ in range(7):
        await client.post("/table/2/order", json={"menu_id": 1})

    zero = await client.get("/table/2/order", params={"limit": 0})
    one = await client.get("/table/2/order", params={"limit": 1})
    assert zero.json() == one.json()
    assert len(zero.json()["orders"]) == 1

    second_page = await client.get("/table/2/order", params={"page": 1})
    assert len(second_page.json()["orders"]) == 2

    list_calls = [c for c in order_repo.calls if c[0] == "list_by_table"]
    assert list_calls == [("list_by_table", 2, 0, 1), ("list_by_table", 2, 0, 1), ("list_by_table", 2, 1, 5)]


@pytest.mark.asyncio
async def test_list_page_far_past_the_end_is_empty(client):
    await client.post("/table/3/order", json={"menu_id": 1})

    r = await client.get("/table/3/order", params={"page": "10000000000000000000"})

    assert r.status_code == 200
    assert r.json() == {"orders": []}


@pytest.mark.asyncio
async def test_list_bad_table_and_bad_query(client):
    r = await client.get("/table/101/order")
    assert r.status_code == 400
    r = await client.get("/table/1/order", params={"limit": "many"})
    assert r.status_code == 400
    assert r.json()["error"] is True


@pytest.mark.asyncio
async def test_list_connection_failure(client, order_repo):
    order_repo.fail_with = ConnectionFailure(OSError("connection refused"))
    r = await client.get("/table/3/order")
    assert r.status_code == 500
    assert r.json() == {"error": True, "message": SERVER_ERROR_MESSAGE}


# ─── Detail ────────────────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_detail_round_trip(client):
    created = (await client.post("/table/3/order", json={"menu_id": 5})).json()["order"]

    r = await client.get(f"/table/3/order/{created['order_id']}")

    assert r.status_code == 200
    assert r.json() == {"order": created}


@pytest.mark.asyncio
async def test_detail_not_found_has_empty_body(client):
    r = await client.get("/table/3/order/999")
    assert r.status_code == 404
    assert r.content == b""


@pytest.mark.asyncio
async def test_order_id_beyond_bigint_is_not_found(client, order_repo):
    for method in ("GET", "DELETE"):
        r = await client.request(method, "/table/3/order/10000000000000000000")
        assert r.status_code == 404
        assert r.content == b""
    assert order_repo.calls == []


@pytest.mark.asyncio
async def test_detail_from_other_table_is_not_found(client):
    created = (await client.post("/table/3/order", json={"menu_id": 5})).json()["order"]
    r = await client.get(f"/table/4/order/{created['order_id']}")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_detail_failure(client, order_repo):
    order_repo.fail_with = DetailFailure(RuntimeError("statement timeout"))
    r = await client.get("/table/3/order/1")
    assert r.status_code == 500
    assert "statement timeout" not in r.text


@pytest.mark.asyncio
async def test_detail_bad_table(client, order_repo):
    r = await client.get("/table/0/order/1")
    assert r.status_code == 400
    assert order_repo.calls == []


# ─── Delete ────────────────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_delete_then_repeat(client):
    created = (await client.post("/table/3/order", json={"menu_id": 5})).json()["order"]
    url = f"/table/3/order/{created['order_id']}"

    first = await client.delete(url)
    assert first.status_code == 200
    assert first.json() == {"order_id": created["order_id"]}

    for _ in range(2):
        again = await client.delete(url)
        assert again.status_code == 404
        assert again.content == b""

    assert (await client.get(url)).status_code == 404


@pytest.mark.asyncio
async def test_delete_from_other_table_keeps_order(client):
    created = (await client.post("/table/3/order", json={"menu_id": 5})).json()["order"]
    r = await client.delete(f"/table/4/order/{created['order_id']}")
    assert r.status_code == 404
    assert (await client.get(f"/table/3/order/{created['order_id']}")).status_code == 200


@pytest.mark.asyncio
async def test_delete_bad_table_and_failure(client, order_repo):
    assert (await client.delete("/table/101/order/1")).status_code == 400
    assert order_repo.calls == []

    order_repo.fail_with = DetailFailure(RuntimeError("lock timeout"))
    r = await client.delete("/table/3/order/1")
    assert r.status_code == 500
    assert r.json()["message"] == SERVER_ERROR_MESSAGE


# ─── Service endpoints ─────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_root(client, settings):
    r = await client.get("/")
    assert r.json() == {"service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}


@pytest.mark.asyncio
async def test_health_with_database(app, client, engine):
    app.state.engine = engine
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"
    assert r.json()["dependencies"] == {"database": "ok"}


@pytest.mark.asyncio
async def test_health_without_database(client):
    r = await client.get("/health")
    assert r.status_code == 503
    assert r.json()["status"] == "degraded"


def test_serve_hands_uvicorn_the_app_factory(monkeypatch):
    from table_order import main

    captured = {}
    monkeypatch.setattr(main.uvicorn, "run", lambda target, **kwargs: captured.update(target=target, **kwargs))

    main.serve()

    assert captured["target"] == "table_order.main:create_app"
    assert captured["factory"] is True
    # importing the module builds no app, engine or logging config
    assert not hasattr(main, "app")
