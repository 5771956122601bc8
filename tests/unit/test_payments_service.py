import pytest

from foodparadise.errors import LedgerWriteError, UpstreamProcessorError
from foodparadise.payments import service as payments_service
from foodparadise.payments.models import PaymentIn


def _payment(cart_ids, **extra):
    return PaymentIn.model_validate({
        "email": "user@example.com",
        "price": 25.50,
        "transactionId": "pi_abc",
        "cartIds": cart_ids,
        "menuItemIds": ["m1", "m2"],
        **extra,
    })


def _seed_cart(db, *ids):
    db.seed("carts", *[{"id": i, "email": "user@example.com", "menu_item_id": "m1", "price": 10} for i in ids])


def test_settle_inserts_payment_then_clears_cart(db):
    _seed_cart(db, "c1", "c2", "keep")
    result = payments_service.settle(db, _payment(["c1", "c2"]))

    assert result.deleted_count == 2
    assert result.requested == 2
    assert not result.partial
    assert [c["id"] for c in db.tables["carts"]] == ["keep"]
    assert len(db.tables["payments"]) == 1
    stored = db.tables["payments"][0]
    assert stored["amount"] == 25.50
    assert stored["email"] == "user@example.com"
    assert stored["created_at"]
    assert result.payment["id"] == stored["id"]


def test_ledger_insert_happens_before_cart_cleanup(db):
    _seed_cart(db, "c1")
    payments_service.settle(db, _payment(["c1"]))
    writes = [c for c in db.calls if c[1] in ("insert", "delete")]
    assert writes == [("payments", "insert"), ("carts", "delete")]


def test_ledger_failure_aborts_without_touching_cart(db):
    _seed_cart(db, "c1", "c2")
    db.fail_on.add(("payments", "insert"))

    with pytest.raises(LedgerWriteError):
        payments_service.settle(db, _payment(["c1", "c2"]))

    assert ("carts", "delete") not in db.calls
    assert len(db.tables["carts"]) == 2
    assert db.tables.get("payments", []) == []


def test_cleanup_failure_keeps_payment(db):
    _seed_cart(db, "c1")
    db.fail_on.add(("carts", "delete"))

    result = payments_service.settle(db, _payment(["c1"]))

    assert len(db.tables["payments"]) == 1
    assert result.deleted_count == 0
    assert result.cleanup_error
    body = result.to_response()
    assert body["paymentResult"]["acknowledged"] is True
    assert body["deleteResult"]["acknowledged"] is False
    assert body["warning"] == "SettlementPartial"


def test_partial_cleanup_reports_actual_count(db):
    _seed_cart(db, "c1", "c2")
    result = payments_service.settle(db, _payment(["c1", "c2", "already-gone"]))

    assert result.deleted_count == 2
    assert result.requested == 3
    assert result.partial
    assert len(db.tables["payments"]) == 1


def test_settle_does_not_touch_other_owners_items_outside_list(db):
    _seed_cart(db, "c1")
    db.seed("carts", {"id": "other", "email": "other@example.com", "menu_item_id": "m9", "price": 1})
    payments_service.settle(db, _payment(["c1"]))
    assert [c["id"] for c in db.tables["carts"]] == ["other"]


def test_replayed_settlement_creates_second_payment(db):
    _seed_cart(db, "c1")
    payments_service.settle(db, _payment(["c1"]))
    second = payments_service.settle(db, _payment(["c1"]))
    assert len(db.tables["payments"]) == 2
    assert second.deleted_count == 0


def test_create_intent_converts_to_minor_units(monkeypatch):
    seen = {}

    def fake_create(*, amount, currency):
        seen["amount"], seen["currency"] = amount, currency
        return {"id": "pi_1", "client_secret": "pi_1_secret_x"}

    monkeypatch.setattr(payments_service.stripe_client, "create_payment_intent", fake_create)
    assert payments_service.create_intent(19.99) == {"clientSecret": "pi_1_secret_x"}
    assert seen == {"amount": 1999, "currency": "usd"}


def test_create_intent_rejects_sub_cent_amount(monkeypatch):
    monkeypatch.setattr(
        payments_service.stripe_client,
        "create_payment_intent",
        lambda **kw: pytest.fail("Stripe ne doit pas être appelé"),
    )
    with pytest.raises(ValueError):
        payments_service.create_intent(0.004)


def test_create_intent_propagates_processor_error(monkeypatch):
    def boom(**kw):
        raise UpstreamProcessorError()

    monkeypatch.setattr(payments_service.stripe_client, "create_payment_intent", boom)
    with pytest.raises(UpstreamProcessorError):
        payments_service.create_intent(10)


def test_list_payments_newest_first(db):
    db.seed(
        "payments",
        {"email": "user@example.com", "amount": 1, "created_at": "2024-01-01T00:00:00"},
        {"email": "user@example.com", "amount": 2, "created_at": "2024-02-01T00:00:00"},
        {"email": "other@example.com", "amount": 3, "created_at": "2024-03-01T00:00:00"},
    )
    rows = payments_service.list_payments(db, "user@example.com")
    assert [r["amount"] for r in rows] == [2, 1]
